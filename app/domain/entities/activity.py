"""Domain entity representing a scheduled activity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Activity:
    """Core attributes describing an activity and where it takes place."""

    id: str | None
    title: str
    date: datetime
    description: str | None = None
    category: str = ""
    city: str = ""
    venue: str = ""
    latitude: float | None = None
    longitude: float | None = None


__all__ = ["Activity"]
