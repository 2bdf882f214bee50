"""ORM models used by the application infrastructure."""

from .activity import ActivityModel

__all__ = ["ActivityModel"]
