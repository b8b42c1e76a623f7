import logging
import uuid
from typing import List

from chirpy_app.exceptions import InvalidIdentifier, NotFound, StorageFailure
from chirpy_app.models import Chirp
from chirpy_app.services.chirp_validator import validate_chirp
from chirpy_app.storage.strategies import ChirpStorageStrategy, RecordNotFoundError, StorageError

logger = logging.getLogger(__name__)


def parse_chirp_id(raw: str) -> uuid.UUID:
    """
    Parse a chirp id taken from the URL path.

    Raises:
        InvalidIdentifier: raw is not a UUID
    """
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise InvalidIdentifier()


class ChirpService:
    """
    Chirp operations on top of an injected storage strategy.

    Storage errors are logged here and turned into NotFound or a generic
    StorageFailure, so no database detail reaches the client.
    """

    def __init__(self, storage: ChirpStorageStrategy):
        self.storage = storage

    def create_chirp(self, body: str, user_id: uuid.UUID) -> Chirp:
        """
        Validate, filter and persist a chirp.

        Process:
        1. Reject bodies over the length limit (ContentTooLong)
        2. Redact banned words
        3. Store the cleaned body
        """
        cleaned = validate_chirp(body)
        try:
            return self.storage.create_chirp(cleaned, user_id)
        except StorageError:
            logger.exception("Error creating chirp for user %s", user_id)
            raise StorageFailure("Couldn't create chirp")

    def get_chirps(self) -> List[Chirp]:
        try:
            return self.storage.get_chirps()
        except StorageError:
            logger.exception("Error listing chirps")
            raise StorageFailure("Couldn't retrieve chirps")

    def get_chirp(self, chirp_id: str) -> Chirp:
        parsed = parse_chirp_id(chirp_id)
        try:
            return self.storage.get_chirp_by_id(parsed)
        except RecordNotFoundError:
            raise NotFound("Chirp not found")
        except StorageError:
            logger.exception("Error fetching chirp %s", parsed)
            raise StorageFailure("Couldn't retrieve chirp")
