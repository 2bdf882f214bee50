"""Domain entities exposed by the application."""

from .activity import Activity

__all__ = ["Activity"]
