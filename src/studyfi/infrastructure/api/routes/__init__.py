"""API routers."""

from studyfi.infrastructure.api.routes.groups_router import router as groups_router
from studyfi.infrastructure.api.routes.users_router import router as users_router

__all__ = ["groups_router", "users_router"]
