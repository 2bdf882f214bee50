"""Command for deleting activities."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.exceptions import ActivityNotFoundError, ActivityWriteError
from app.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteActivity:
    id: str


def delete_activity(session: Session, request: DeleteActivity) -> None:
    """Delete the specified activity."""

    repository = ActivityRepository(session)
    if repository.get(request.id) is None:
        raise ActivityNotFoundError(request.id)

    if not repository.delete(request.id):
        raise ActivityWriteError()

    logger.info("Deleted activity %s", request.id)
