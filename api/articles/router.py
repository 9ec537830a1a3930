"""
Public article listing.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from core import db
from core.cors import Resource
from core.errors import ApiError
from core.query import coerce_int

from . import repository

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

logger = logging.getLogger(__name__)

router = APIRouter()
resource = Resource("/api/articles", ("GET",))


@router.get("/api/articles")
async def list_articles(
    category: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
) -> dict:
    """
    Published articles, newest first.

    `total` is the number of rows in this page, not the full match count.
    """
    try:
        articles = await repository.list_published_articles(
            category=category or None,
            limit=coerce_int(limit, DEFAULT_LIMIT),
            offset=coerce_int(offset, DEFAULT_OFFSET),
        )
    except db.DatabaseError as exc:
        logger.exception("articles_fetch_failed category=%s", category)
        raise ApiError(500, "Failed to fetch articles", error=str(exc)) from exc

    return {
        "success": True,
        "articles": articles,
        "total": len(articles),
    }
