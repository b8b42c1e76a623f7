"""
Storage module for users and chirps.

Implements the Strategy Pattern so services never depend on a concrete
database.
"""

from .strategies import (
    ChirpStorageStrategy,
    InMemoryStorage,
    RecordNotFoundError,
    SQLAlchemyStorage,
    StorageError,
)
from .factory import StorageBackend, StorageFactory

__all__ = [
    "ChirpStorageStrategy",
    "InMemoryStorage",
    "SQLAlchemyStorage",
    "StorageError",
    "RecordNotFoundError",
    "StorageBackend",
    "StorageFactory",
]
