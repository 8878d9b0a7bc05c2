"""SQLAlchemy model for the account_groups junction table.

One row per membership edge. Both ``AccountModel.groups`` and
``GroupModel.members`` read from it, so an edge is always visible from both
sides.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from studyfi.infrastructure.persistence.database import Base


class AccountGroupModel(Base):
    """Junction table for the many-to-many account/group relationship.

    Attributes:
        account_id: Foreign key to accounts table.
        group_id: Foreign key to study_groups table.
    """

    __tablename__ = "account_groups"

    account_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Foreign key to accounts table",
    )
    group_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("study_groups.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
        comment="Foreign key to study_groups table",
    )

    def __repr__(self) -> str:
        return f"<AccountGroup(account_id={self.account_id}, group_id={self.group_id})>"
