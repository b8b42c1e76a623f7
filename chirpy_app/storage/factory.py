"""
Factory for creating storage instances.

The SQLAlchemy backend wraps the request's session, so it is built per
request. The in-memory backend is a single cached instance for the process.
"""

import logging
from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from .strategies import ChirpStorageStrategy, InMemoryStorage, SQLAlchemyStorage

logger = logging.getLogger(__name__)


class StorageBackend(Enum):
    """Available storage backends"""
    SQLALCHEMY = "sqlalchemy"
    MEMORY = "memory"


class StorageFactory:
    """Simple factory for creating storage instances."""

    _memory_instance: Optional[InMemoryStorage] = None

    @classmethod
    def create(cls, backend: StorageBackend, db: Optional[Session] = None) -> ChirpStorageStrategy:
        """
        Create a storage instance for the given backend.

        Args:
            backend: Type of storage backend (from enum)
            db: Database session, required for the SQLAlchemy backend

        Returns:
            Storage strategy instance
        """
        if backend == StorageBackend.SQLALCHEMY:
            if db is None:
                raise ValueError("SQLAlchemy storage needs a database session")
            return SQLAlchemyStorage(db)

        elif backend == StorageBackend.MEMORY:
            if cls._memory_instance is None:
                cls._memory_instance = InMemoryStorage()
                logger.info("In-memory storage initialized")
            return cls._memory_instance

        else:
            raise ValueError(f"Unknown storage backend: {backend}")

    @classmethod
    def clear_instance(cls):
        """Clear cached in-memory instance (for testing)"""
        cls._memory_instance = None
