"""Errors raised by the activity use cases."""

from __future__ import annotations


class ActivityNotFoundError(LookupError):
    """Raised when no activity matches the requested identifier."""

    def __init__(self, activity_id: str) -> None:
        super().__init__(f"Activity {activity_id!r} not found")
        self.activity_id = activity_id


class ActivityWriteError(RuntimeError):
    """Raised when the store reports that a write had no effect."""

    def __init__(self, message: str = "Problem saving changes") -> None:
        super().__init__(message)


__all__ = ["ActivityNotFoundError", "ActivityWriteError"]
