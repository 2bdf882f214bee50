"""Query returning every stored activity."""

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.repositories import ActivityRepository


@dataclass(frozen=True)
class ListActivities:
    """Request all activities."""


def list_activities(session: Session, request: ListActivities) -> Sequence[Activity]:
    return ActivityRepository(session).list()
