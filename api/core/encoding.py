"""
JSON shapes for database values.

Rows leave the API with NUMERIC columns as strings (no float rounding) and
timestamps as UTC ISO-8601 with millisecond precision and a `Z` suffix.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Mapping


def utc_timestamp(value: datetime) -> str:
    # Naive values come from `timestamp without time zone` columns, stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def json_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return utc_timestamp(value)
    return value


def json_row(row: Mapping[str, Any]) -> dict[str, Any]:
    return {key: json_value(value) for key, value in row.items()}
