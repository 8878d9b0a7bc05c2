"""SQLAlchemy model for the study_groups table."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studyfi.infrastructure.persistence.database import Base


class GroupModel(Base):
    """SQLAlchemy model for the study_groups table.

    Attributes:
        id: Primary key (UUID string).
        name: Group name.
        description: Optional description.
        created_at: Timestamp when the group was created.
        updated_at: Timestamp when the group was last updated.
    """

    __tablename__ = "study_groups"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Group ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Group name",
    )
    description: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Description of the group's purpose",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    members: Mapped[list["AccountModel"]] = relationship(  # noqa: F821
        "AccountModel",
        secondary="account_groups",
        back_populates="groups",
        viewonly=True,
        lazy="selectin",
        order_by="AccountModel.name",
    )

    @property
    def member_count(self) -> int:
        """Number of member accounts. Requires 'members' to be loaded."""
        return len(self.members)

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name})>"
