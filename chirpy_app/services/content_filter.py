"""Profanity redaction for chirp bodies."""

BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def clean_body(text: str) -> str:
    """
    Replace every banned word with ****.

    Words are split on single spaces and compared case-insensitively;
    punctuation stays attached, so "kerfuffle!" is left alone. Only simple
    lowercasing applies: ligatures such as "ﬄ" are not expanded. Never fails.
    """
    words = text.split(" ")
    return " ".join(MASK if word.lower() in BANNED_WORDS else word for word in words)
