"""
Service catalog persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.query import SelectQuery


async def list_active_categories() -> list[dict[str, Any]]:
    sql, args = (
        SelectQuery("SELECT * FROM service_categories", filters=("is_active = true",))
        .order_by("sort_order", "name")
        .build()
    )
    return await db.fetch_all(sql, *args)


async def list_active_services() -> list[dict[str, Any]]:
    sql, args = (
        SelectQuery(
            """
            SELECT s.*, sc.name AS category_name, sc.icon AS category_icon, sc.color AS category_color
            FROM services s
            LEFT JOIN service_categories sc ON s.category_id = sc.id
            """,
            filters=("s.is_active = true",),
        )
        .order_by("s.name")
        .build()
    )
    return await db.fetch_all(sql, *args)
