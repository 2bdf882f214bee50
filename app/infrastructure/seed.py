"""Sample activities loaded into an empty database."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.repositories import ActivityRepository
from app.utils import now_in_utc

logger = logging.getLogger(__name__)

# (title, month offset, description, category, city, venue, latitude, longitude)
_SAMPLE_ACTIVITIES: tuple[tuple[str, int, str, str, str, str, float, float], ...] = (
    (
        "Past Activity 1",
        -2,
        "Activity 2 months ago",
        "drinks",
        "London",
        "The Lamb",
        51.521,
        -0.118,
    ),
    (
        "Past Activity 2",
        -1,
        "Activity 1 month ago",
        "culture",
        "Paris",
        "The Louvre",
        48.861,
        2.336,
    ),
    (
        "Future Activity 1",
        1,
        "Activity 1 month in future",
        "culture",
        "London",
        "Natural History Museum",
        51.496,
        -0.176,
    ),
    (
        "Future Activity 2",
        2,
        "Activity 2 months in future",
        "music",
        "London",
        "The O2",
        51.503,
        0.003,
    ),
    (
        "Future Activity 3",
        3,
        "Activity 3 months in future",
        "drinks",
        "London",
        "The Mayflower",
        51.502,
        -0.053,
    ),
    (
        "Future Activity 4",
        4,
        "Activity 4 months in future",
        "drinks",
        "London",
        "The Blackfriar",
        51.512,
        -0.104,
    ),
    (
        "Future Activity 5",
        5,
        "Activity 5 months in future",
        "culture",
        "London",
        "Sherlock Holmes Museum",
        51.523,
        -0.158,
    ),
    (
        "Future Activity 6",
        6,
        "Activity 6 months in future",
        "music",
        "London",
        "Roundhouse Camden",
        51.543,
        -0.152,
    ),
    (
        "Future Activity 7",
        7,
        "Activity 7 months in future",
        "travel",
        "London",
        "River Thames",
        51.508,
        -0.076,
    ),
    (
        "Future Activity 8",
        8,
        "Activity 8 months in future",
        "film",
        "London",
        "Cineworld Leicester Square",
        51.511,
        -0.130,
    ),
)


def build_sample_activities(now: datetime | None = None) -> list[Activity]:
    """Return the sample activities dated relative to ``now``."""

    reference = (now or now_in_utc()).replace(tzinfo=None, microsecond=0)
    return [
        Activity(
            id=f"seed-{index:02d}",
            title=title,
            date=reference + timedelta(days=30 * months),
            description=description,
            category=category,
            city=city,
            venue=venue,
            latitude=latitude,
            longitude=longitude,
        )
        for index, (
            title,
            months,
            description,
            category,
            city,
            venue,
            latitude,
            longitude,
        ) in enumerate(_SAMPLE_ACTIVITIES, start=1)
    ]


def seed_activities(session: Session) -> int:
    """Insert the sample activities when the table is empty.

    Returns the number of rows inserted, ``0`` when data was already present.
    """

    repository = ActivityRepository(session)
    if not repository.is_empty():
        logger.debug("Activity table already populated; skipping seed")
        return 0

    inserted = repository.bulk_insert(build_sample_activities())
    logger.info("Seeded %d sample activities", inserted)
    return inserted


__all__ = ["build_sample_activities", "seed_activities"]
