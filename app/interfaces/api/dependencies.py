"""FastAPI dependency utilities."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.mediator import Mediator, log_request
from app.application.use_cases import ACTIVITY_HANDLERS
from app.infrastructure.database import get_db


def get_mediator(db: Session = Depends(get_db)) -> Mediator:
    """Return a mediator bound to the request's database session."""

    return Mediator(db, ACTIVITY_HANDLERS, behaviors=[log_request])
