"""
Booking persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db
from core.query import SelectQuery

BOOKINGS_WITH_SERVICE = """
SELECT b.*, s.name AS service_name, sc.name AS category_name
FROM bookings b
LEFT JOIN services s ON b.service_id = s.id
LEFT JOIN service_categories sc ON s.category_id = sc.id
"""


async def list_bookings() -> list[dict[str, Any]]:
    sql, args = SelectQuery(BOOKINGS_WITH_SERVICE).order_by("b.created_at DESC").build()
    return await db.fetch_all(sql, *args)


async def insert_booking(
    *,
    name: str,
    email: str,
    phone: str,
    service_id: int | None = None,
    service_name: str | None = None,
    preferred_date: date | None = None,
    preferred_time: str | None = None,
    message: str | None = None,
    address: str | None = None,
) -> int:
    """
    Insert a booking with status `pending` and return its id.
    """
    row = await db.fetch_one(
        """
        INSERT INTO bookings (
          name, email, phone, service_id, service_name,
          preferred_date, preferred_time, message, address, status, created_at
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, 'pending', NOW())
        RETURNING id
        """,
        name,
        email,
        phone,
        service_id,
        service_name,
        preferred_date,
        preferred_time,
        message,
        address,
    )
    if row is None:
        raise db.DatabaseError("Failed to insert booking.")
    return int(row["id"])
