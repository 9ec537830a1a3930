"""
Contact form endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.cors import Resource

from . import schemas, service

router = APIRouter()
resource = Resource("/api/contact/submit", ("POST",))


@router.post("/api/contact/submit", status_code=status.HTTP_201_CREATED)
async def submit_contact_form(request: schemas.ContactSubmission) -> dict:
    submission_id = await service.submit(request)
    return {
        "success": True,
        "message": "Contact form submitted successfully",
        "submissionId": submission_id,
    }
