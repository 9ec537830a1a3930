"""
Small SELECT builder for the listing endpoints.

Values only ever travel as bound parameters: a predicate is a SQL fragment with
a single `{}` marker, and `build()` replaces each marker with the next `$n`
placeholder while appending the value to the argument list. Column names and
fragments are code constants, never request input.
"""

from __future__ import annotations

import re
from typing import Any

_DIGITS = re.compile(r"[0-9]+")


def coerce_int(raw: str | int | None, default: int) -> int:
    """
    Parse a query-string integer; anything unparseable or negative falls back to `default`.
    """
    if raw is None:
        return default
    if isinstance(raw, int):
        value = raw
    else:
        # ASCII digits only: int() alone would also take "1_000" and non-ASCII digits.
        text = raw.strip()
        if not _DIGITS.fullmatch(text):
            return default
        value = int(text, 10)
    if value < 0:
        return default
    return value


class SelectQuery:
    def __init__(self, base: str, *, filters: tuple[str, ...] = ()) -> None:
        self._base = base.strip()
        self._filters = list(filters)
        self._predicates: list[tuple[str, Any]] = []
        self._order_by: list[str] = []
        self._limit: int | None = None
        self._offset: int | None = None

    def where(self, fragment: str, value: Any) -> SelectQuery:
        if fragment.count("{}") != 1:
            raise ValueError(f"Predicate must contain exactly one placeholder: {fragment!r}")
        self._predicates.append((fragment, value))
        return self

    def where_equals(self, column: str, value: Any) -> SelectQuery:
        """
        Add `column = $n` unless the value is absent (None or empty string).
        """
        if value is None or value == "":
            return self
        return self.where(f"{column} = {{}}", value)

    def order_by(self, *terms: str) -> SelectQuery:
        self._order_by.extend(terms)
        return self

    def limit(self, value: int | None) -> SelectQuery:
        self._limit = value
        return self

    def offset(self, value: int | None) -> SelectQuery:
        self._offset = value
        return self

    def build(self) -> tuple[str, list[Any]]:
        args: list[Any] = []

        def bind(value: Any) -> str:
            args.append(value)
            return f"${len(args)}"

        conditions = list(self._filters)
        for fragment, value in self._predicates:
            conditions.append(fragment.format(bind(value)))

        parts = [self._base]
        if conditions:
            parts.append("WHERE " + "\n  AND ".join(conditions))
        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))
        if self._limit is not None:
            parts.append(f"LIMIT {bind(self._limit)}")
        # OFFSET 0 is a no-op, so it is left out.
        if self._offset:
            parts.append(f"OFFSET {bind(self._offset)}")
        return "\n".join(parts), args
