"""
Contact submission persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def insert_submission(
    *,
    name: str,
    email: str,
    message: str,
    preferred_contact: str,
    phone: str | None = None,
    service: str | None = None,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO contact_submissions (
          name, email, phone, service, message, preferred_contact, status, created_at
        )
        VALUES ($1, $2, $3, $4, $5, $6, 'new', NOW())
        RETURNING id
        """,
        name,
        email,
        phone,
        service,
        message,
        preferred_contact,
    )
    if row is None:
        raise db.DatabaseError("Failed to insert contact submission.")
    return int(row["id"])
