"""Service for password reset logic.

Handles token issuance, expiry checks and single-use consumption. An
account's reset state lives in its ``reset_token``/``reset_token_expiry``
columns:

* Idle: both null.
* Pending: both set, expiry not yet passed.
* Expired: both set, expiry passed. Rejected, but left in place until a new
  token is requested or a reset succeeds.

Only a successful reset clears the columns; the token is stored as a SHA-256
digest, so a cleared or replaced token can never match again.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from studyfi.core.logging import get_logger
from studyfi.domain.entities.reset_token import (
    ResetState,
    ResetToken,
    hash_token,
    reset_state,
)
from studyfi.domain.exceptions import (
    InvalidResetTokenError,
    NotFoundError,
    ResetTokenExpiredError,
)
from studyfi.domain.services.password_validator import (
    PasswordValidator,
    default_password_validator,
)
from studyfi.infrastructure.auth.password_hasher import hash_password
from studyfi.infrastructure.persistence.models import AccountModel
from studyfi.infrastructure.persistence.repositories import AccountRepository
from studyfi.infrastructure.services.email_service import EmailService

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PasswordResetService:
    """Service for handling password reset business logic."""

    def __init__(
        self,
        session: AsyncSession,
        account_repo: AccountRepository,
        email_service: EmailService,
        reset_password_url: str,
        token_ttl: timedelta = timedelta(hours=1),
        password_validator: PasswordValidator = default_password_validator,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the password reset service.

        Args:
            session: SQLAlchemy async session.
            account_repo: Repository for account operations.
            email_service: Service used to deliver the reset link.
            reset_password_url: Page the reset link points to; the token is
                appended as ``?token=...``.
            token_ttl: How long an issued token stays valid.
            password_validator: Credential policy for the new password.
            clock: Returns the current time as an aware UTC datetime.
        """
        self.session = session
        self.account_repo = account_repo
        self.email_service = email_service
        self.reset_password_url = reset_password_url
        self.token_ttl = token_ttl
        self.password_validator = password_validator
        self.clock = clock

    def build_reset_link(self, raw_token: str) -> str:
        """Build the link sent to the user."""
        return f"{self.reset_password_url}?token={raw_token}"

    async def request_reset(self, email: str) -> datetime:
        """Issue a reset token for an account and email the reset link.

        Any earlier token for the account stops matching as soon as the new
        one is stored. The token is committed before the email is sent, and a
        failed delivery does not undo it.

        Args:
            email: Email address of the account.

        Returns:
            When the new token expires.

        Raises:
            NotFoundError: If no account has this email.
        """
        account = await self.account_repo.get_by_email(email)
        if account is None:
            logger.info("Password reset requested for unknown email")
            raise NotFoundError("Account", email)

        token = ResetToken.generate(self.clock(), self.token_ttl)
        account.reset_token = token.token_hash
        account.reset_token_expiry = token.expires_at
        await self.account_repo.save(account)
        await self.session.commit()

        logger.info(
            "Password reset token issued",
            account_id=account.id,
            expires_at=token.expires_at.isoformat(),
        )

        sent = await self.email_service.send_password_reset_email(
            to=account.email,
            name=account.name,
            reset_link=self.build_reset_link(token.raw_token),
            expires_in_minutes=int(self.token_ttl.total_seconds() // 60),
        )
        if not sent:
            logger.error("Failed to send password reset email", account_id=account.id)

        return token.expires_at

    async def _get_account_for_token(self, raw_token: str) -> AccountModel | None:
        if not raw_token:
            return None
        return await self.account_repo.get_by_reset_token(hash_token(raw_token))

    async def reset_password(self, raw_token: str, new_password: str) -> AccountModel:
        """Reset a password using a pending reset token.

        Args:
            raw_token: The token from the reset link.
            new_password: The new plaintext password.

        Returns:
            The updated account.

        Raises:
            InvalidResetTokenError: If no account holds the token.
            ResetTokenExpiredError: If the token's expiry has passed.
            PasswordPolicyViolation: If the new password fails the policy;
                the token stays valid.
        """
        account = await self._get_account_for_token(raw_token)
        if account is None:
            logger.info("Password reset failed: invalid token")
            raise InvalidResetTokenError()

        state = reset_state(account.reset_token, account.reset_token_expiry, self.clock())
        if state is ResetState.EXPIRED:
            logger.info("Password reset failed: token expired", account_id=account.id)
            raise ResetTokenExpiredError()

        self.password_validator.check(new_password)

        account.password_hash = hash_password(new_password)
        account.reset_token = None
        account.reset_token_expiry = None
        account.updated_at = self.clock()
        await self.account_repo.save(account)
        await self.session.commit()

        logger.info("Password reset successfully", account_id=account.id)
        return account

    async def verify_reset_token(self, raw_token: str) -> tuple[bool, datetime | None]:
        """Check whether a reset token is pending, without consuming it.

        Args:
            raw_token: The token from the reset link.

        Returns:
            A tuple of (is_valid, expires_at). If invalid, expires_at is None.
        """
        account = await self._get_account_for_token(raw_token)
        if account is None:
            return False, None

        state = reset_state(account.reset_token, account.reset_token_expiry, self.clock())
        if state is not ResetState.PENDING:
            return False, None
        return True, account.reset_token_expiry
