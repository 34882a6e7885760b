"""Storage backings: in-memory (tests, local dev) and DynamoDB."""

from .memory_record_store import InMemoryRecordStore
from .memory_session_store import InMemorySessionStore
from .dynamodb_record_store import DynamoDBRecordStore
from .dynamodb_session_store import DynamoDBSessionStore

__all__ = [
    "InMemoryRecordStore",
    "InMemorySessionStore",
    "DynamoDBRecordStore",
    "DynamoDBSessionStore"
]
