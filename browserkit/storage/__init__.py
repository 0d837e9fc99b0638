"""Storage backends for BrowserKit."""

from .base import KeyValueBackend, StorageAccessor, StorageArea, encode_value
from .memory import InMemoryBackend
from .sqlalchemy import AsyncSQLAlchemyStorage, SQLAlchemyBackend

__all__ = [
    "KeyValueBackend",
    "StorageAccessor",
    "StorageArea",
    "encode_value",
    "InMemoryBackend",
    "AsyncSQLAlchemyStorage",
    "SQLAlchemyBackend",
]
