"""Membership service for the account/group relationship.

An edge is one ``account_groups`` row. Both sides of the relationship are
read from that row, so adding or removing it updates the account's groups and
the group's members together.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from studyfi.core.logging import get_logger
from studyfi.domain.exceptions import NotFoundError
from studyfi.infrastructure.persistence.repositories import (
    AccountRepository,
    GroupRepository,
)

logger = get_logger(__name__)


class MembershipService:
    """Service for adding and removing group members."""

    def __init__(
        self,
        session: AsyncSession,
        account_repo: AccountRepository | None = None,
        group_repo: GroupRepository | None = None,
    ) -> None:
        """Initialize the membership service.

        Args:
            session: SQLAlchemy async session.
            account_repo: Account repository (defaults to one on ``session``).
            group_repo: Group repository (defaults to one on ``session``).
        """
        self.session = session
        self.account_repo = account_repo or AccountRepository(session)
        self.group_repo = group_repo or GroupRepository(session)

    async def _ensure_exists(self, account_id: str, group_id: str) -> None:
        if await self.account_repo.get_by_id(account_id) is None:
            raise NotFoundError("Account", account_id)
        if await self.group_repo.get_by_id(group_id) is None:
            raise NotFoundError("Group", group_id)

    async def add_membership(self, account_id: str, group_id: str) -> bool:
        """Add an account to a group.

        Idempotent: adding an existing member changes nothing.

        Args:
            account_id: Account ID.
            group_id: Group ID.

        Returns:
            True if a new membership was created, False if it already existed.

        Raises:
            NotFoundError: If the account or the group does not exist.
        """
        await self._ensure_exists(account_id, group_id)

        if await self.group_repo.is_member(group_id, account_id):
            logger.info("Account already in group", account_id=account_id, group_id=group_id)
            return False

        await self.group_repo.add_member(group_id, account_id)
        await self.session.commit()

        logger.info("Account added to group", account_id=account_id, group_id=group_id)
        return True

    async def remove_membership(self, account_id: str, group_id: str) -> bool:
        """Remove an account from a group.

        Args:
            account_id: Account ID.
            group_id: Group ID.

        Returns:
            True if a membership was removed, False if there was none.

        Raises:
            NotFoundError: If the account or the group does not exist.
        """
        await self._ensure_exists(account_id, group_id)

        removed = await self.group_repo.remove_member(group_id, account_id)
        await self.session.commit()

        if removed:
            logger.info("Account removed from group", account_id=account_id, group_id=group_id)
        return removed
