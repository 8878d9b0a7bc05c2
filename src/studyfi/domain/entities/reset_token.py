"""Password reset token entity.

An account's reset state is encoded by two nullable columns: the SHA-256
digest of the issued token and its expiry. They are always set or cleared
together.
"""

import enum
import hashlib
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


class ResetState(str, enum.Enum):
    """Password reset state of an account."""

    IDLE = "idle"
    PENDING = "pending"
    EXPIRED = "expired"


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime.

    SQLite hands back naive datetimes even for timezone-aware columns; those
    are stored as UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def hash_token(raw_token: str) -> str:
    """Hash a raw reset token for storage and lookup."""
    return hashlib.sha256(raw_token.encode()).hexdigest()


def reset_state(
    token_hash: str | None, expires_at: datetime | None, now: datetime
) -> ResetState:
    """Derive the reset state from an account's token columns.

    A token is expired only once ``now`` is strictly past its expiry.
    """
    if token_hash is None or expires_at is None:
        return ResetState.IDLE
    if as_utc(expires_at) < as_utc(now):
        return ResetState.EXPIRED
    return ResetState.PENDING


@dataclass
class ResetToken:
    """A freshly issued password reset token.

    Attributes:
        raw_token: The secret sent to the user; never persisted.
        token_hash: SHA-256 digest of ``raw_token``; persisted on the account.
        expires_at: When the token stops authorizing a reset.
    """

    raw_token: str = field(repr=False)
    token_hash: str
    expires_at: datetime

    @classmethod
    def generate(cls, issued_at: datetime, ttl: timedelta = timedelta(hours=1)) -> "ResetToken":
        """Generate a new random token valid for ``ttl`` from ``issued_at``.

        Args:
            issued_at: Issue time (aware UTC).
            ttl: Token lifetime (default 1 hour).

        Returns:
            The new token.
        """
        raw_token = secrets.token_urlsafe(32)
        return cls(
            raw_token=raw_token,
            token_hash=hash_token(raw_token),
            expires_at=as_utc(issued_at) + ttl,
        )
