"""Command for creating activities."""

import logging
import uuid
from dataclasses import dataclass, replace

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import ActivityWriteError
from app.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateActivity:
    activity: Activity


def create_activity(session: Session, request: CreateActivity) -> str:
    """Store a new activity and return its identifier.

    Activities submitted without an ``id`` receive a random UUID.
    """

    activity = request.activity
    if not activity.id:
        activity = replace(activity, id=str(uuid.uuid4()))

    if not ActivityRepository(session).insert(activity):
        raise ActivityWriteError()

    logger.info("Created activity %s", activity.id)
    return activity.id
