"""Identity service for account registration and profile management."""

import uuid
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from studyfi.core.logging import get_logger
from studyfi.domain.entities.account import AccountProfile
from studyfi.domain.exceptions import NotFoundError
from studyfi.domain.services.password_validator import (
    PasswordValidator,
    default_password_validator,
)
from studyfi.infrastructure.auth.password_hasher import hash_password
from studyfi.infrastructure.persistence.models import AccountModel
from studyfi.infrastructure.persistence.repositories import AccountRepository

logger = get_logger(__name__)


class IdentityService:
    """Service for account identity business logic."""

    def __init__(
        self,
        session: AsyncSession,
        account_repo: AccountRepository | None = None,
        password_validator: PasswordValidator = default_password_validator,
    ) -> None:
        """Initialize the identity service.

        Args:
            session: SQLAlchemy async session.
            account_repo: Account repository (defaults to one on ``session``).
            password_validator: Credential policy applied to every password.
        """
        self.session = session
        self.account_repo = account_repo or AccountRepository(session)
        self.password_validator = password_validator

    async def register(self, profile: AccountProfile) -> AccountModel:
        """Register a new account.

        The password is checked before anything is written, so a policy
        violation leaves no trace in the store.

        Args:
            profile: Submitted account fields, including the plaintext password.

        Returns:
            The persisted account.

        Raises:
            PasswordPolicyViolation: If the password fails the policy.
        """
        self.password_validator.check(profile.password)

        now = datetime.now(timezone.utc)
        account = AccountModel(
            id=str(uuid.uuid4()),
            name=profile.name,
            email=profile.email,
            password_hash=hash_password(profile.password),
            phone_contact=profile.phone_contact,
            birth_date=profile.birth_date,
            country=profile.country,
            about_me=profile.about_me,
            current_address=profile.current_address,
            created_at=now,
            updated_at=now,
        )
        await self.account_repo.create(account)
        await self.session.commit()

        logger.info("Account registered", account_id=account.id, email=account.email)
        return await self.get_account(account.id)

    async def get_account(self, account_id: str) -> AccountModel:
        """Get an account by ID.

        Raises:
            NotFoundError: If no account has this ID.
        """
        account = await self.account_repo.get_by_id(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        return account

    async def list_accounts(self) -> list[AccountModel]:
        """List every account."""
        return await self.account_repo.list_all()

    async def update_profile(self, account_id: str, profile: AccountProfile) -> AccountModel:
        """Replace an account's profile fields.

        All profile fields are overwritten, and the submitted password is
        validated and re-hashed even when it is unchanged.

        Args:
            account_id: Account ID.
            profile: New account fields, including the plaintext password.

        Returns:
            The updated account.

        Raises:
            NotFoundError: If no account has this ID.
            PasswordPolicyViolation: If the password fails the policy.
        """
        account = await self.get_account(account_id)
        self.password_validator.check(profile.password)

        account.name = profile.name
        account.email = profile.email
        account.password_hash = hash_password(profile.password)
        account.phone_contact = profile.phone_contact
        account.birth_date = profile.birth_date
        account.country = profile.country
        account.about_me = profile.about_me
        account.current_address = profile.current_address
        account.updated_at = datetime.now(timezone.utc)

        await self.account_repo.save(account)
        await self.session.commit()

        logger.info("Account profile updated", account_id=account_id)
        return await self.get_account(account_id)
