"""
Pydantic models for todo items.

``TodoCreate`` and ``TodoUpdate`` describe request bodies; ``TodoRead``
is returned by every todo route.  Deadlines are ISO‑8601 strings,
either a bare date (``2025-01-01``) or a full timestamp with an
optional ``Z``/offset suffix, parsed by pydantic.  Values without an
offset are taken to be UTC.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes; aware values are returned unchanged."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TodoCreate(BaseModel):
    """Schema for creating a todo."""

    title: str = Field(..., examples=["Study FastAPI"])
    deadline: datetime = Field(..., examples=["2025-01-01T12:00:00Z"])

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TodoUpdate(BaseModel):
    """Schema for editing a todo.

    Both fields are optional.  A missing or empty value leaves the
    stored field unchanged; it never clears it.
    """

    title: Optional[str] = None
    deadline: Optional[datetime] = None

    @field_validator("deadline", mode="before")
    @classmethod
    def empty_deadline_is_missing(cls, value: Any) -> Any:
        return None if value == "" else value

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)


class TodoRead(BaseModel):
    """Schema for reading a todo from the API."""

    id: str
    title: str
    deadline: datetime
    done: bool = False
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
