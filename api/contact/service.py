"""
Contact form business logic.
"""

from __future__ import annotations

import logging

from fastapi import status

from core import db
from core.errors import ApiError

from . import repository, schemas

REQUIRED_FIELDS_MESSAGE = "Name, email, and message are required"
DEFAULT_PREFERRED_CONTACT = "email"

logger = logging.getLogger(__name__)


async def submit(payload: schemas.ContactSubmission) -> int:
    if not (payload.name and payload.email and payload.message):
        raise ApiError(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

    try:
        submission_id = await repository.insert_submission(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            service=payload.service,
            message=payload.message,
            preferred_contact=payload.preferred_contact or DEFAULT_PREFERRED_CONTACT,
        )
    except db.DatabaseError as exc:
        logger.exception("contact_submit_failed email=%s", payload.email)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to submit contact form",
            error=str(exc),
        ) from exc

    logger.info("contact_submitted submission_id=%s", submission_id)
    return submission_id
