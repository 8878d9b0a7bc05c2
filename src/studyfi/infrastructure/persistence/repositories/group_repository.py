"""Repository for group and membership database operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from studyfi.infrastructure.persistence.models import AccountGroupModel, AccountModel, GroupModel


class GroupRepository:
    """Repository for group database operations.

    Membership edges are written here as single ``account_groups`` rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    def _select(self):
        return (
            select(GroupModel)
            .options(selectinload(GroupModel.members).selectinload(AccountModel.groups))
            .execution_options(populate_existing=True)
        )

    async def create(self, group: GroupModel) -> GroupModel:
        """Create a new group.

        Args:
            group: Group model to create.

        Returns:
            Created group model.
        """
        self.session.add(group)
        await self.session.flush()
        return group

    async def save(self, group: GroupModel) -> GroupModel:
        """Persist all fields of an existing group.

        Args:
            group: Group model to save.

        Returns:
            Saved group model.
        """
        if group not in self.session:
            self.session.add(group)
        await self.session.flush()
        return group

    async def get_by_id(self, group_id: str) -> GroupModel | None:
        """Get a group by ID.

        Args:
            group_id: Group ID.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(
            self._select().where(GroupModel.id == group_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[GroupModel]:
        """List every group, oldest first.

        Returns:
            List of group models.
        """
        result = await self.session.execute(
            self._select().order_by(GroupModel.created_at, GroupModel.id)
        )
        return list(result.scalars().all())

    async def add_member(self, group_id: str, account_id: str) -> None:
        """Add an account to a group.

        Args:
            group_id: Group ID.
            account_id: Account ID.
        """
        self.session.add(AccountGroupModel(account_id=account_id, group_id=group_id))
        await self.session.flush()

    async def remove_member(self, group_id: str, account_id: str) -> bool:
        """Remove an account from a group.

        Args:
            group_id: Group ID.
            account_id: Account ID.

        Returns:
            True if a membership row was deleted.
        """
        result = await self.session.execute(
            delete(AccountGroupModel).where(
                (AccountGroupModel.group_id == group_id)
                & (AccountGroupModel.account_id == account_id)
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def is_member(self, group_id: str, account_id: str) -> bool:
        """Check if an account is in a group.

        Args:
            group_id: Group ID.
            account_id: Account ID.

        Returns:
            True if the account is a member, False otherwise.
        """
        result = await self.session.execute(
            select(AccountGroupModel.account_id).where(
                (AccountGroupModel.group_id == group_id)
                & (AccountGroupModel.account_id == account_id)
            )
        )
        return result.scalar_one_or_none() is not None
