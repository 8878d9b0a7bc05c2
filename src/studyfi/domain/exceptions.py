"""Domain exceptions raised by Studyfi services.

Each exception corresponds to one failure kind the HTTP layer maps to a
response. None of them are retried.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from studyfi.domain.services.password_validator import PasswordValidationError


class StudyfiError(Exception):
    """Base exception for all domain errors."""

    pass


class NotFoundError(StudyfiError):
    """Raised when an entity does not exist for the given key."""

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")


class PasswordPolicyViolation(StudyfiError):
    """Raised when a candidate password fails the credential policy.

    Attributes:
        error: The first rule that failed.
    """

    def __init__(self, error: "PasswordValidationError") -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> str:
        return self.error.code


class InvalidResetTokenError(StudyfiError):
    """Raised when no account holds the presented reset token."""

    def __init__(self) -> None:
        super().__init__("Invalid reset token")


class ResetTokenExpiredError(StudyfiError):
    """Raised when the reset token exists but its expiry has passed."""

    def __init__(self) -> None:
        super().__init__("Reset token has expired")
