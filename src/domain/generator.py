"""
Synthetic record generation.

The id comes from a regular PRNG; the token is derived from OS-sourced random
bytes. Both sources and the host name lookup can be swapped for tests.
"""

from __future__ import annotations

import random
import secrets
import socket
from typing import Callable, Optional

from src.domain.models import Record

ID_MIN = 1
ID_MAX = 999
TOKEN_BYTES = 4

_rng = random.Random()


def generate_token(token_bytes: Callable[[int], bytes] = secrets.token_bytes) -> str:
    """
    Return a 7-character uppercase hex token.

    4 random bytes render as 8 hex digits; the first digit is dropped.
    """
    return token_bytes(TOKEN_BYTES).hex()[1:].upper()


def generate_id(rng: Optional[random.Random] = None) -> int:
    """Uniform integer in [ID_MIN, ID_MAX]."""
    return (rng or _rng).randint(ID_MIN, ID_MAX)


def generate_record(
    rng: Optional[random.Random] = None,
    token_bytes: Callable[[int], bytes] = secrets.token_bytes,
    hostname: Optional[Callable[[], str]] = None,
) -> Record:
    """
    Build a fresh record. The same token fills name, surname, address and city.
    """
    token = generate_token(token_bytes)
    return Record(
        id=generate_id(rng),
        name=token,
        surname=token,
        address=token,
        city=token,
        host=(hostname or socket.gethostname)(),
    )


__all__ = ["ID_MIN", "ID_MAX", "generate_token", "generate_id", "generate_record"]
