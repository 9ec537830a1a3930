"""
Service catalog endpoints (categories and grouped services).
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter

from core import db
from core.cors import Resource
from core.errors import ApiError

from . import repository, service

logger = logging.getLogger(__name__)

router = APIRouter()
resources = (
    Resource("/api/services/categories", ("GET",)),
    Resource("/api/services", ("GET",)),
)


@router.get("/api/services/categories")
async def list_categories() -> dict:
    try:
        categories = await repository.list_active_categories()
    except db.DatabaseError as exc:
        logger.exception("categories_fetch_failed")
        raise ApiError(500, "Failed to fetch categories", error=str(exc)) from exc
    return {"success": True, "data": categories}


@router.get("/api/services")
async def list_services() -> dict:
    try:
        rows = await repository.list_active_services()
        grouped = service.group_services(rows)
    except (db.DatabaseError, json.JSONDecodeError) as exc:
        logger.exception("services_fetch_failed")
        raise ApiError(500, "Failed to fetch services", error=str(exc)) from exc
    return {"success": True, "data": grouped}
