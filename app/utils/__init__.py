"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_utc_naive_datetime,
    now_in_utc,
    restore_utc_offset,
    utc_offset_minutes,
)

__all__ = [
    "ensure_utc_naive_datetime",
    "now_in_utc",
    "restore_utc_offset",
    "utc_offset_minutes",
]
