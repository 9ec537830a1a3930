"""
Password hashing helpers (bcrypt).
"""

from __future__ import annotations

import bcrypt

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class PasswordHashError(RuntimeError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordHashError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=12)).decode("utf-8")


def is_bcrypt_hash(value: str) -> bool:
    # bcrypt output is always 60 characters: prefix, cost, 53 chars of salt+hash.
    value = (value or "").strip()
    return len(value) == 60 and value.startswith(_BCRYPT_PREFIXES)
