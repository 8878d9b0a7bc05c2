"""Persistence repositories for database operations."""

from studyfi.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from studyfi.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)

__all__ = [
    "AccountRepository",
    "GroupRepository",
]
