"""
Booking business logic.
"""

from __future__ import annotations

import logging

from fastapi import status

from core import db
from core.errors import ApiError

from . import repository, schemas

REQUIRED_FIELDS_MESSAGE = "Name, email, and phone are required"

logger = logging.getLogger(__name__)


async def list_bookings() -> list[dict]:
    try:
        return await repository.list_bookings()
    except db.DatabaseError as exc:
        logger.exception("bookings_fetch_failed")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch bookings",
            error=str(exc),
        ) from exc


async def submit_booking(payload: schemas.BookingCreate) -> int:
    # Presence only; no format checks on email or phone.
    if not (payload.name and payload.email and payload.phone):
        raise ApiError(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

    try:
        booking_id = await repository.insert_booking(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            service_id=payload.service_id,
            service_name=payload.service_name,
            preferred_date=payload.preferred_date,
            preferred_time=payload.preferred_time,
            message=payload.message,
            address=payload.address,
        )
    except db.DatabaseError as exc:
        logger.exception("booking_submit_failed email=%s", payload.email)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to submit booking",
            error=str(exc),
        ) from exc

    logger.info("booking_created booking_id=%s service_id=%s", booking_id, payload.service_id)
    return booking_id
