"""SQLAlchemy models for Studyfi tables.

All models inherit from the Base class defined in database.py.
"""

from studyfi.infrastructure.persistence.models.account import AccountModel
from studyfi.infrastructure.persistence.models.account_groups import AccountGroupModel
from studyfi.infrastructure.persistence.models.group import GroupModel

__all__ = [
    "AccountGroupModel",
    "AccountModel",
    "GroupModel",
]
