"""Query for retrieving a single activity."""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import ActivityNotFoundError
from app.infrastructure.repositories import ActivityRepository


@dataclass(frozen=True)
class GetActivity:
    id: str


def get_activity(session: Session, request: GetActivity) -> Activity:
    """Return the activity identified by ``request.id`` or raise an error."""

    activity = ActivityRepository(session).get(request.id)
    if activity is None:
        raise ActivityNotFoundError(request.id)
    return activity
