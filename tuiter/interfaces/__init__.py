"""
Interfaces for dependency inversion.

Access layers and services depend on these abstractions so the memory and
DynamoDB backings can be swapped (and mocked in tests).
"""

from .record_store import IRecordStore, generate_id
from .user_repository import IUserRepository
from .tuit_repository import ITuitRepository
from .session_store import ISessionStore

__all__ = [
    "IRecordStore",
    "generate_id",
    "IUserRepository",
    "ITuitRepository",
    "ISessionStore"
]
