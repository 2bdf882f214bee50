"""Schemas for activity endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import Activity

# Identifiers travel as a single path segment in GET/DELETE URLs.
_ID_PATTERN = r"^[^/]*$"


class ActivityBase(BaseModel):
    """Fields shared by every activity payload.

    Leading and trailing whitespace is stripped from every text field before
    validation, so ``"  Run  "`` is stored and returned as ``"Run"`` and a
    blank title is rejected.
    """

    title: str = Field(..., min_length=1, max_length=200)
    date: datetime
    description: str | None = None
    category: str = Field(default="", max_length=50)
    city: str = Field(default="", max_length=100)
    venue: str = Field(default="", max_length=100)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    model_config = ConfigDict(str_strip_whitespace=True)

    def to_entity(self) -> Activity:
        return Activity(**self.model_dump())


class ActivityCreate(ActivityBase):
    """Payload required to create an activity.

    The identifier may be chosen by the client; when it is omitted the server
    generates one. Identifiers cannot contain ``/``.
    """

    id: str | None = Field(default=None, max_length=36, pattern=_ID_PATTERN)


class ActivityUpdate(ActivityBase):
    """Full replacement of an existing activity, matched by ``id``."""

    id: str = Field(..., min_length=1, max_length=36, pattern=_ID_PATTERN)


class ActivityRead(ActivityBase):
    id: str

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityCreate", "ActivityRead", "ActivityUpdate"]
