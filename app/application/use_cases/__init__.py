"""Aggregate application use cases."""

from .activities import ACTIVITY_HANDLERS

__all__ = ["ACTIVITY_HANDLERS"]
