"""Group service for study group management."""

import uuid
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from studyfi.core.logging import get_logger
from studyfi.domain.exceptions import NotFoundError
from studyfi.infrastructure.persistence.models import GroupModel
from studyfi.infrastructure.persistence.repositories import GroupRepository

logger = get_logger(__name__)


class GroupService:
    """Service for study group business logic."""

    def __init__(self, session: AsyncSession, group_repo: GroupRepository | None = None) -> None:
        self.session = session
        self.group_repo = group_repo or GroupRepository(session)

    async def create_group(self, name: str, description: str | None = None) -> GroupModel:
        """Create a new group.

        Args:
            name: Group name.
            description: Optional description.

        Returns:
            The persisted group.
        """
        now = datetime.now(timezone.utc)
        group = GroupModel(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        await self.group_repo.create(group)
        await self.session.commit()

        logger.info("Group created", group_id=group.id, name=name)
        return await self.get_group(group.id)

    async def update_group(
        self, group_id: str, name: str, description: str | None = None
    ) -> GroupModel:
        """Rename a group and replace its description.

        Raises:
            NotFoundError: If no group has this ID.
        """
        group = await self.get_group(group_id)
        group.name = name
        group.description = description
        group.updated_at = datetime.now(timezone.utc)

        await self.group_repo.save(group)
        await self.session.commit()

        logger.info("Group updated", group_id=group_id)
        return await self.get_group(group_id)

    async def get_group(self, group_id: str) -> GroupModel:
        """Get a group by ID.

        Raises:
            NotFoundError: If no group has this ID.
        """
        group = await self.group_repo.get_by_id(group_id)
        if group is None:
            raise NotFoundError("Group", group_id)
        return group

    async def list_groups(self) -> list[GroupModel]:
        """List every group."""
        return await self.group_repo.list_all()
