"""
Salted token authentication.

The server never sees the password: every login sends a fresh random salt
and ``md5(password + salt)`` as the token. Requires Subsonic API >= 1.13.0
on the server side.
"""

import hashlib
import random
import secrets
import string
from dataclasses import dataclass
from typing import Optional

SALT_ALPHABET = string.ascii_letters + string.digits
MIN_SALT_LENGTH = 6
DEFAULT_SALT_LENGTH = 10

_system_random = secrets.SystemRandom()


@dataclass(frozen=True)
class Credentials:
    """A salt and the token derived from it. Always replaced together."""

    salt: str = ""
    token: str = ""

    def __bool__(self) -> bool:
        return bool(self.salt and self.token)

    def __repr__(self) -> str:
        return f"Credentials(salt={self.salt!r}, token='***')"


EMPTY_CREDENTIALS = Credentials()


def generate_salt(length: int = DEFAULT_SALT_LENGTH, rng: Optional[random.Random] = None) -> str:
    if length < MIN_SALT_LENGTH:
        raise ValueError(f"salt length must be at least {MIN_SALT_LENGTH}, got {length}")
    rng = rng or _system_random
    return "".join(rng.choice(SALT_ALPHABET) for _ in range(length))


def make_token(password: str, salt: str) -> str:
    return hashlib.md5((password + salt).encode("utf-8")).hexdigest()


def derive_credentials(
    password: str,
    length: int = DEFAULT_SALT_LENGTH,
    rng: Optional[random.Random] = None,
) -> Credentials:
    """Derive a fresh (salt, token) pair for ``password``.

    ``rng`` defaults to the OS entropy source; pass a seeded
    ``random.Random`` to make the salt reproducible.
    """
    salt = generate_salt(length, rng)
    return Credentials(salt=salt, token=make_token(password, salt))
