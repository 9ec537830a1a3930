"""
Contact form request schema.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactSubmission(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    service: str | None = None
    message: str | None = None
    preferred_contact: str | None = Field(default=None, alias="preferredContact")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and value == "":
            return None
        return value
