"""API request/response schemas."""

from studyfi.infrastructure.api.schemas.account_schemas import (
    AccountRequest,
    AccountResponse,
    ForgotPasswordRequest,
    GroupSummary,
    MembershipResponse,
    MessageResponse,
    ResetPasswordRequest,
    VerifyResetTokenResponse,
)
from studyfi.infrastructure.api.schemas.group_schemas import (
    GroupRequest,
    GroupResponse,
    MemberSummary,
)

__all__ = [
    "AccountRequest",
    "AccountResponse",
    "ForgotPasswordRequest",
    "GroupRequest",
    "GroupResponse",
    "GroupSummary",
    "MemberSummary",
    "MembershipResponse",
    "MessageResponse",
    "ResetPasswordRequest",
    "VerifyResetTokenResponse",
]
