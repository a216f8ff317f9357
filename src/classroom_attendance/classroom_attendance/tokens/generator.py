from __future__ import annotations

import secrets

from ..core.constants import DEFAULT_TOKEN_LENGTH, MIN_TOKEN_LENGTH, TOKEN_ALPHABET


def generate_token(length: int = DEFAULT_TOKEN_LENGTH) -> str:
    """Uppercase alphanumeric secret, short enough to type from the board."""

    if length < MIN_TOKEN_LENGTH:
        raise ValueError(f"Token length must be at least {MIN_TOKEN_LENGTH}")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
