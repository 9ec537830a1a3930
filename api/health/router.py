"""
Health check with a database connectivity probe.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from core import db, encoding, settings
from core.cors import Resource

logger = logging.getLogger(__name__)

router = APIRouter()
resource = Resource("/api/health", ("GET",))


def _utc_timestamp() -> str:
    # e.g. 2024-05-01T12:00:00.123Z
    return encoding.utc_timestamp(datetime.now(timezone.utc))


@router.get("/api/health")
async def health() -> JSONResponse:
    try:
        await db.fetch_one("SELECT 1")
    except db.DatabaseError as exc:
        logger.exception("health_probe_failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "ERROR",
                "message": "Database connection failed",
                "timestamp": _utc_timestamp(),
                "error": str(exc),
            },
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "OK",
            "message": f"{settings.service_name()} API is running",
            "timestamp": _utc_timestamp(),
            "environment": settings.app_env(),
            "platform": settings.deploy_platform(),
        },
    )
