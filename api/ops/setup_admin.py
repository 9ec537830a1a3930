"""
Create the site admin user if it does not exist yet.

Usage:
    python -m ops.setup_admin

Reads ADMIN_NAME / ADMIN_EMAIL and either ADMIN_PASSWORD_HASH (a precomputed
bcrypt hash) or ADMIN_PASSWORD (hashed here). Safe to run repeatedly: the user
is looked up by email before inserting. This is not atomic, so two concurrent
runs can still both insert.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Any

import asyncpg

from core import db, security, settings
from core.logging import configure_logging

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
ADMIN_STATUS = "active"


class AdminSetupError(RuntimeError):
    pass


@dataclass(frozen=True)
class AdminAccount:
    name: str
    email: str
    password_hash: str


def admin_account_from_env() -> AdminAccount:
    password_hash = settings.admin_password_hash()
    if password_hash:
        if not security.is_bcrypt_hash(password_hash):
            raise AdminSetupError("ADMIN_PASSWORD_HASH is not a bcrypt hash.")
    else:
        password = settings.admin_password()
        if not password:
            raise AdminSetupError("Set ADMIN_PASSWORD_HASH or ADMIN_PASSWORD.")
        password_hash = security.hash_password(password)

    return AdminAccount(
        name=settings.admin_name(),
        email=settings.admin_email(),
        password_hash=password_hash,
    )


async def find_user(conn: asyncpg.Connection, email: str) -> dict[str, Any] | None:
    row = await conn.fetchrow(
        """
        SELECT id, name, email, role, status
        FROM users
        WHERE email = $1
        """,
        email,
    )
    return dict(row) if row is not None else None


async def insert_admin(conn: asyncpg.Connection, account: AdminAccount) -> dict[str, Any]:
    row = await conn.fetchrow(
        """
        INSERT INTO users (name, email, password_hash, role, status)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, name, email, role, status
        """,
        account.name,
        account.email,
        account.password_hash,
        ADMIN_ROLE,
        ADMIN_STATUS,
    )
    if row is None:
        raise AdminSetupError("Failed to create admin user.")
    return dict(row)


async def ensure_admin(conn: asyncpg.Connection, account: AdminAccount) -> tuple[bool, dict[str, Any]]:
    """
    Return (created, user_row).
    """
    existing = await find_user(conn, account.email)
    if existing is not None:
        return False, existing
    return True, await insert_admin(conn, account)


async def setup_admin() -> int:
    conn: asyncpg.Connection | None = None
    try:
        account = admin_account_from_env()

        logger.info("Connecting to database...")
        conn = await db.connect()
        logger.info("Database connected")

        logger.info("Checking if admin user exists email=%s", account.email)
        created, user = await ensure_admin(conn, account)
        if created:
            logger.info("Admin user created: %s", user)
        else:
            logger.info("Admin user already exists: %s", user)
        return 0
    except (AdminSetupError, security.PasswordHashError, db.DatabaseError, *db.DRIVER_ERRORS) as exc:
        logger.error("Error setting up admin user: %s", exc)
        return 1
    finally:
        if conn is not None:
            await conn.close()


def main() -> int:
    settings.load_env_file()
    configure_logging()
    return asyncio.run(setup_admin())


if __name__ == "__main__":
    sys.exit(main())
