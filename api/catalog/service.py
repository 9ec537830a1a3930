"""
Service catalog shaping.

Services come back flat from SQL and are grouped by category name for the
front end, in the order categories are first seen.
"""

from __future__ import annotations

import json
from typing import Any

DEFAULT_CATEGORY = "Other"
DEFAULT_ICON = "Settings"
DEFAULT_COLOR = "from-mr-cerulean to-mr-cerulean-dark"


def _features(raw: Any) -> list:
    # json/jsonb columns arrive as text from asyncpg unless a codec is set.
    if not raw:
        return []
    if isinstance(raw, list):
        return raw
    return json.loads(raw)


def group_services(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    groups: dict[str, dict[str, Any]] = {}
    for row in rows:
        category = row.get("category_name") or DEFAULT_CATEGORY
        group = groups.get(category)
        if group is None:
            group = {
                "category": category,
                "icon": row.get("category_icon") or DEFAULT_ICON,
                "color": row.get("category_color") or DEFAULT_COLOR,
                "services": [],
            }
            groups[category] = group

        group["services"].append(
            {
                "id": row.get("id"),
                "name": row.get("name"),
                "description": row.get("description"),
                "price": row.get("price"),
                "duration": row.get("duration"),
                "icon": row.get("icon"),
                "features": _features(row.get("features")),
            }
        )
    return list(groups.values())
