"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.query import SelectQuery

ARTICLE_COLUMNS = """
SELECT id, title, excerpt, content, category, thumbnail_url,
       author, created_at, updated_at, is_published, read_time
FROM articles
"""


def published_articles_query(
    *,
    category: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> SelectQuery:
    return (
        SelectQuery(ARTICLE_COLUMNS, filters=("is_published = true",))
        .where_equals("category", category)
        .order_by("created_at DESC")
        .limit(limit)
        .offset(offset)
    )


async def list_published_articles(
    *,
    category: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> list[dict[str, Any]]:
    sql, args = published_articles_query(category=category, limit=limit, offset=offset).build()
    return await db.fetch_all(sql, *args)
