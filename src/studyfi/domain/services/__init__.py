"""Domain services for Studyfi.

Services hold the business rules and own the commit of each operation.
"""

from studyfi.domain.services.password_validator import (
    PasswordValidationError,
    PasswordValidator,
    default_password_validator,
)
from studyfi.domain.services.group_service import GroupService
from studyfi.domain.services.identity_service import IdentityService
from studyfi.domain.services.membership_service import MembershipService
from studyfi.domain.services.password_reset_service import PasswordResetService

__all__ = [
    "GroupService",
    "IdentityService",
    "MembershipService",
    "PasswordResetService",
    "PasswordValidationError",
    "PasswordValidator",
    "default_password_validator",
]
