"""SQLAlchemy model for the accounts table.

An account is a registered user: identity, profile fields, password hash and
the password reset token columns.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studyfi.infrastructure.persistence.database import Base


class AccountModel(Base):
    """SQLAlchemy model for the accounts table.

    Attributes:
        id: Primary key (UUID string).
        name: Display name.
        email: Email address (indexed, uniqueness not enforced).
        password_hash: Argon2id hash of the password.
        phone_contact: Phone number.
        birth_date: Birth date as supplied by the user.
        country: Country.
        about_me: Free-text bio.
        current_address: Postal address.
        reset_token: SHA-256 digest of the pending reset token.
        reset_token_expiry: When the pending reset token expires.
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Account ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Email address",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Hashed password (argon2)",
    )
    phone_contact: Mapped[str | None] = mapped_column(String(50), nullable=True)
    birth_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    about_me: Mapped[str | None] = mapped_column(Text, nullable=True)
    current_address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    reset_token: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        unique=True,
        comment="SHA-256 hash of the pending password reset token",
    )
    reset_token_expiry: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Expiry of the pending password reset token",
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

    # Read-only view over account_groups; rows are written by GroupRepository.
    # selectin keeps the reverse side loaded when a read repopulates instances.
    groups: Mapped[list["GroupModel"]] = relationship(  # noqa: F821
        "GroupModel",
        secondary="account_groups",
        back_populates="members",
        viewonly=True,
        lazy="selectin",
        order_by="GroupModel.name",
    )

    __table_args__ = (
        CheckConstraint(
            "(reset_token IS NULL) = (reset_token_expiry IS NULL)",
            name="ck_accounts_reset_token_pair",
        ),
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email})>"
