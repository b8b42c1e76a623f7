"""
Storage strategies using Strategy Pattern.

The services only talk to ChirpStorageStrategy, so the same business logic
runs against the relational database or a plain in-memory store:
- SQLAlchemyStorage: PostgreSQL/SQLite through a request-scoped session
- InMemoryStorage: development and tests, no database needed
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chirpy_app.models import Chirp, User

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Any failure of the storage backend."""


class RecordNotFoundError(StorageError):
    """Lookup by identifier found nothing."""


class ChirpStorageStrategy(ABC):
    """
    Abstract base class for storage strategies.

    Methods block for the duration of the call. Failures raise StorageError;
    a missed lookup raises RecordNotFoundError so callers can tell it apart.
    """

    @abstractmethod
    def create_user(self, email: str) -> User:
        """
        Create a user with fresh id and timestamps.

        Raises:
            StorageError: e.g. the email is already taken
        """
        pass

    @abstractmethod
    def delete_all_users(self) -> None:
        """Delete every user, and with them every chirp they own"""
        pass

    @abstractmethod
    def create_chirp(self, body: str, user_id: uuid.UUID) -> Chirp:
        """Persist a chirp. The body is stored as given."""
        pass

    @abstractmethod
    def get_chirps(self) -> List[Chirp]:
        """All chirps, oldest first"""
        pass

    @abstractmethod
    def get_chirp_by_id(self, chirp_id: uuid.UUID) -> Chirp:
        """
        Fetch one chirp.

        Raises:
            RecordNotFoundError: no chirp has this id
        """
        pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SQLAlchemyStorage(ChirpStorageStrategy):
    """
    Relational storage through a SQLAlchemy session.

    The session belongs to the request (see dependencies.get_storage); each write
    commits on its own and is rolled back if it fails.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, email: str) -> User:
        now = _now()
        user = User(id=uuid.uuid4(), email=email, created_at=now, updated_at=now)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"create_user failed: {e}") from e
        return user

    def delete_all_users(self) -> None:
        try:
            # SQLite does not enforce ON DELETE CASCADE by default
            self.db.query(Chirp).filter(
                Chirp.user_id.in_(select(User.id))
            ).delete(synchronize_session=False)
            self.db.query(User).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"delete_all_users failed: {e}") from e

    def create_chirp(self, body: str, user_id: uuid.UUID) -> Chirp:
        now = _now()
        chirp = Chirp(id=uuid.uuid4(), body=body, user_id=user_id, created_at=now, updated_at=now)
        try:
            self.db.add(chirp)
            self.db.commit()
            self.db.refresh(chirp)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"create_chirp failed: {e}") from e
        return chirp

    def get_chirps(self) -> List[Chirp]:
        try:
            return self.db.query(Chirp).order_by(Chirp.created_at.asc()).all()
        except SQLAlchemyError as e:
            raise StorageError(f"get_chirps failed: {e}") from e

    def get_chirp_by_id(self, chirp_id: uuid.UUID) -> Chirp:
        try:
            chirp = self.db.get(Chirp, chirp_id)
        except SQLAlchemyError as e:
            raise StorageError(f"get_chirp_by_id failed: {e}") from e
        if chirp is None:
            raise RecordNotFoundError(f"chirp {chirp_id} not found")
        return chirp


class InMemoryStorage(ChirpStorageStrategy):
    """
    In-memory storage using Python dicts.

    Pros:
    - No database required
    - Fast, good for development and testing

    Cons:
    - Lost on restart
    - Not shared between processes

    Stores transient (not session-bound) model instances so the same
    response schemas serialize them. Foreign keys are not checked, like
    SQLite without PRAGMA foreign_keys.
    """

    def __init__(self):
        self._users: Dict[uuid.UUID, User] = {}
        self._chirps: Dict[uuid.UUID, Chirp] = {}
        self._lock = threading.Lock()

    def create_user(self, email: str) -> User:
        with self._lock:
            if any(user.email == email for user in self._users.values()):
                raise StorageError(f"duplicate email: {email}")
            now = _now()
            user = User(id=uuid.uuid4(), email=email, created_at=now, updated_at=now)
            self._users[user.id] = user
        return user

    def delete_all_users(self) -> None:
        with self._lock:
            self._chirps = {
                chirp_id: chirp
                for chirp_id, chirp in self._chirps.items()
                if chirp.user_id not in self._users
            }
            self._users.clear()

    def create_chirp(self, body: str, user_id: uuid.UUID) -> Chirp:
        now = _now()
        chirp = Chirp(id=uuid.uuid4(), body=body, user_id=user_id, created_at=now, updated_at=now)
        with self._lock:
            self._chirps[chirp.id] = chirp
        return chirp

    def get_chirps(self) -> List[Chirp]:
        with self._lock:
            # dicts keep insertion order, which is creation order
            return list(self._chirps.values())

    def get_chirp_by_id(self, chirp_id: uuid.UUID) -> Chirp:
        with self._lock:
            chirp = self._chirps.get(chirp_id)
        if chirp is None:
            raise RecordNotFoundError(f"chirp {chirp_id} not found")
        return chirp
