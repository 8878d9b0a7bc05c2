"""Password validation service.

Checks a candidate password against a fixed rule set, in order:

1. Not empty
2. At least 8 characters
3. At least one digit
4. At least one uppercase letter
5. At least one special character from ``!@#$%^&*(),.?":{}|<>``

Validation stops at the first rule that fails.
"""

import re
from dataclasses import dataclass

from studyfi.domain.exceptions import PasswordPolicyViolation


@dataclass(frozen=True)
class PasswordValidationError:
    """Represents a password validation error.

    Attributes:
        field: The field name (always 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


class PasswordValidator:
    """Validates password strength against the credential policy."""

    MIN_LENGTH = 8
    SPECIAL_CHARS = '!@#$%^&*(),.?":{}|<>'

    _DIGIT_RE = re.compile(r"\d")
    _UPPER_RE = re.compile(r"[A-Z]")
    _SPECIAL_RE = re.compile(f"[{re.escape(SPECIAL_CHARS)}]")

    def validate(self, password: str | None) -> PasswordValidationError | None:
        """Validate a password against the policy.

        Args:
            password: The password to validate.

        Returns:
            The first failed rule, or None if the password is valid.
        """
        if not password:
            return PasswordValidationError(
                field="password",
                message="Password cannot be empty",
                code="password_empty",
            )

        if len(password) < self.MIN_LENGTH:
            return PasswordValidationError(
                field="password",
                message=f"Password must be at least {self.MIN_LENGTH} characters long",
                code="password_too_short",
            )

        if not self._DIGIT_RE.search(password):
            return PasswordValidationError(
                field="password",
                message="Password must contain at least one number",
                code="password_no_digit",
            )

        if not self._UPPER_RE.search(password):
            return PasswordValidationError(
                field="password",
                message="Password must contain at least one uppercase letter",
                code="password_no_uppercase",
            )

        if not self._SPECIAL_RE.search(password):
            return PasswordValidationError(
                field="password",
                message="Password must contain at least one special character",
                code="password_no_special",
            )

        return None

    def check(self, password: str | None) -> None:
        """Validate a password and raise on the first failed rule.

        Raises:
            PasswordPolicyViolation: If the password fails the policy.
        """
        error = self.validate(password)
        if error is not None:
            raise PasswordPolicyViolation(error)

    def is_valid(self, password: str | None) -> bool:
        """Check if a password is valid."""
        return self.validate(password) is None


# Default validator instance
default_password_validator = PasswordValidator()
