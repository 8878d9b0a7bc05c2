"""Domain entities for Studyfi.

Entities are plain dataclasses with no dependency on infrastructure.
"""

from studyfi.domain.entities.account import AccountProfile
from studyfi.domain.entities.reset_token import (
    ResetState,
    ResetToken,
    as_utc,
    hash_token,
    reset_state,
)

__all__ = [
    "AccountProfile",
    "ResetState",
    "ResetToken",
    "as_utc",
    "hash_token",
    "reset_state",
]
