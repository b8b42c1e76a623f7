"""
FastAPI dependencies for dependency injection.

Routes depend on services; services depend on a storage strategy; the
SQLAlchemy strategy wraps a session opened for the request. Tests swap any layer
through app.dependency_overrides.
"""

from typing import Iterator

from fastapi import Depends, Request

from sqlalchemy.orm import sessionmaker

from chirpy_app.config import Settings, settings
from chirpy_app.database.connection import get_session_factory
from chirpy_app.services.chirp_service import ChirpService
from chirpy_app.services.metrics import HitCounter
from chirpy_app.services.user_service import UserService
from chirpy_app.storage.factory import StorageBackend, StorageFactory
from chirpy_app.storage.strategies import ChirpStorageStrategy


def get_settings() -> Settings:
    return settings


def get_hit_counter(request: Request) -> HitCounter:
    """The counter created with the app (see main.py)"""
    return request.app.state.hit_counter


def get_storage(
    app_settings: Settings = Depends(get_settings),
    session_factory: sessionmaker = Depends(get_session_factory),
) -> Iterator[ChirpStorageStrategy]:
    """
    Get the storage strategy selected by settings.storage_backend.

    The in-memory backend never touches the database. For the SQLAlchemy
    backend a session is opened for this request and closed when it ends.
    """
    backend = StorageBackend(app_settings.storage_backend)
    if backend == StorageBackend.MEMORY:
        yield StorageFactory.create(backend)
        return

    db = session_factory()
    try:
        yield StorageFactory.create(backend, db=db)
    finally:
        db.close()


def get_user_service(storage: ChirpStorageStrategy = Depends(get_storage)) -> UserService:
    return UserService(storage)


def get_chirp_service(storage: ChirpStorageStrategy = Depends(get_storage)) -> ChirpService:
    return ChirpService(storage)
