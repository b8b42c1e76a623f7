import logging

from chirpy_app.exceptions import StorageFailure
from chirpy_app.models import User
from chirpy_app.storage.strategies import ChirpStorageStrategy, StorageError

logger = logging.getLogger(__name__)


class UserService:
    """User operations on top of an injected storage strategy."""

    def __init__(self, storage: ChirpStorageStrategy):
        self.storage = storage

    def create_user(self, email: str) -> User:
        """
        Create a user.

        Returns the model instance; the route serializes it with UserResponse.
        """
        try:
            return self.storage.create_user(email)
        except StorageError:
            logger.exception("Error creating user")
            raise StorageFailure("Couldn't create user")

    def delete_all_users(self) -> None:
        """Remove every user (and their chirps). Only the dev reset calls this."""
        try:
            self.storage.delete_all_users()
        except StorageError:
            logger.exception("Error deleting users")
            raise StorageFailure("Internal Server Error")
