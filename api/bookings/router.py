"""
Booking API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.cors import Resource

from . import schemas, service

router = APIRouter()
resource = Resource("/api/bookings", ("GET", "POST"))


@router.get("/api/bookings")
async def list_bookings() -> dict:
    bookings = await service.list_bookings()
    return {"success": True, "data": {"bookings": bookings}}


@router.post("/api/bookings", status_code=status.HTTP_201_CREATED)
async def create_booking(request: schemas.BookingCreate) -> dict:
    booking_id = await service.submit_booking(request)
    return {
        "success": True,
        "message": "Booking submitted successfully",
        "bookingId": booking_id,
    }
