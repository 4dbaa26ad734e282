"""Utilities for generating short opaque tokens."""

import uuid


def generate_token(length: int = 9) -> str:
    """
    Generate a short random token.

    Used for column ids and placeholder task ids. Tokens only need to be
    unique within one board and are regenerated on every parse.

    Example: "3f9a0c1be"
    """
    return uuid.uuid4().hex[:length]
