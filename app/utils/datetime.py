"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def now_in_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` expressed in UTC but without ``tzinfo``.

    The ``activity.date`` column is a plain ``DATETIME``. Naive values are
    returned untouched; aware values are converted so that every stored
    timestamp shares the same reference.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def utc_offset_minutes(value: datetime | None) -> int | None:
    """Return the UTC offset of ``value`` in minutes, ``None`` when naive."""

    if value is None:
        return None
    offset = value.utcoffset()
    if offset is None:
        return None
    return int(offset.total_seconds() // 60)


def restore_utc_offset(value: datetime | None, offset_minutes: int | None) -> datetime | None:
    """Rebuild an aware datetime from its naive UTC value and original offset.

    Inverse of :func:`ensure_utc_naive_datetime` combined with
    :func:`utc_offset_minutes`. Values stored without an offset come back naive.
    """

    if value is None or offset_minutes is None:
        return value
    original = timezone(timedelta(minutes=offset_minutes))
    return value.replace(tzinfo=timezone.utc).astimezone(original)
