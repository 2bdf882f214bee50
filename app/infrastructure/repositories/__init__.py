"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository

__all__ = ["ActivityRepository"]
