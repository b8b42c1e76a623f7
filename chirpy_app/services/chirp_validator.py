from typing import Optional

from chirpy_app.config import settings
from chirpy_app.exceptions import ContentTooLong
from chirpy_app.services.content_filter import clean_body


def validate_chirp(body: str, max_length: Optional[int] = None) -> str:
    """
    Check the raw body length, then return the filtered body.

    The limit applies to what the user sent, before redaction, and counts
    UTF-8 bytes, so each "é" uses two of the 140.

    Raises:
        ContentTooLong: body is longer than max_length bytes (default from settings)
    """
    limit = settings.max_chirp_length if max_length is None else max_length
    if len(body.encode("utf-8")) > limit:
        raise ContentTooLong()
    return clean_body(body)
