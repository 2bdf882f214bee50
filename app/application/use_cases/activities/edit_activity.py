"""Command for replacing an existing activity."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import ActivityNotFoundError, ActivityWriteError
from app.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditActivity:
    activity: Activity


def edit_activity(session: Session, request: EditActivity) -> None:
    """Overwrite every field of the activity sharing ``request.activity.id``."""

    activity = request.activity
    repository = ActivityRepository(session)
    if not activity.id or repository.get(activity.id) is None:
        raise ActivityNotFoundError(activity.id or "")

    if not repository.update(activity):
        raise ActivityWriteError()

    logger.info("Updated activity %s", activity.id)
