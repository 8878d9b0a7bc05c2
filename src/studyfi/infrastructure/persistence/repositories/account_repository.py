"""Account repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from studyfi.infrastructure.persistence.models import AccountModel, GroupModel


class AccountRepository:
    """Repository for account database operations.

    Lookups return None when nothing matches. Reads load the account's groups
    and each group's members, and overwrite any stale copy already held by
    the session, so callers see committed membership rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    def _select(self):
        return (
            select(AccountModel)
            .options(selectinload(AccountModel.groups).selectinload(GroupModel.members))
            .execution_options(populate_existing=True)
        )

    async def create(self, account: AccountModel) -> AccountModel:
        """Create a new account.

        Args:
            account: Account model to create.

        Returns:
            Created account model.
        """
        self.session.add(account)
        await self.session.flush()
        return account

    async def save(self, account: AccountModel) -> AccountModel:
        """Persist all fields of an existing account.

        Args:
            account: Account model to save.

        Returns:
            Saved account model.
        """
        if account not in self.session:
            self.session.add(account)
        await self.session.flush()
        return account

    async def get_by_id(self, account_id: str) -> AccountModel | None:
        """Get an account by ID.

        Args:
            account_id: Account ID (UUID string).

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            self._select().where(AccountModel.id == account_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> AccountModel | None:
        """Get an account by email.

        Email uniqueness is not enforced, so the oldest match wins.

        Args:
            email: Email address.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            self._select()
            .where(AccountModel.email == email)
            .order_by(AccountModel.created_at, AccountModel.id)
            .limit(1)
        )
        return result.scalars().first()

    async def get_by_reset_token(self, token_hash: str) -> AccountModel | None:
        """Get the account holding a reset token.

        Args:
            token_hash: SHA-256 digest of the raw reset token.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            self._select().where(AccountModel.reset_token == token_hash)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[AccountModel]:
        """List every account, oldest first.

        Returns:
            List of account models.
        """
        result = await self.session.execute(
            self._select().order_by(AccountModel.created_at, AccountModel.id)
        )
        return list(result.scalars().all())
