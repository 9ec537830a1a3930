"""
Booking request schemas.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class BookingCreate(BaseModel):
    # Unknown keys (including any caller-supplied `status`) are dropped.
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    service_id: int | None = None
    service_name: str | None = None
    preferred_date: date | None = None
    preferred_time: str | None = None
    message: str | None = None
    address: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and value == "":
            return None
        return value
