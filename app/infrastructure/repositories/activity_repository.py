"""Persistence layer for activities."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.models import ActivityModel
from app.utils import (
    ensure_utc_naive_datetime,
    restore_utc_offset,
    utc_offset_minutes,
)

logger = logging.getLogger(__name__)


class ActivityRepository:
    """Provide CRUD operations for activities.

    Reads return ``None`` when nothing matches; writes return ``False`` when
    the database reports that no row was affected. Every write commits on its
    own. Errors raised by the driver are propagated after rolling back.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Activity]:
        models = self.session.scalars(select(ActivityModel)).all()
        return [self._to_entity(model) for model in models]

    def get(self, activity_id: str) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        return self._to_entity(model) if model else None

    def is_empty(self) -> bool:
        return not self.session.scalar(select(exists().select_from(ActivityModel)))

    def insert(self, activity: Activity) -> bool:
        if not activity.id:
            msg = "Activities must have an id before being stored"
            raise ValueError(msg)
        if self.session.get(ActivityModel, activity.id) is not None:
            logger.warning("Activity %s was not inserted: duplicate id", activity.id)
            return False
        model = ActivityModel(id=activity.id)
        self._apply_entity_to_model(model, activity)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning("Activity %s was not inserted: duplicate id", activity.id)
            return False
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return True

    def bulk_insert(self, activities: Iterable[Activity]) -> int:
        models = []
        for activity in activities:
            model = ActivityModel(id=activity.id)
            self._apply_entity_to_model(model, activity)
            models.append(model)
        self.session.add_all(models)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return len(models)

    def update(self, activity: Activity) -> bool:
        statement = (
            update(ActivityModel)
            .where(ActivityModel.id == activity.id)
            .values(**self._column_values(activity))
            .execution_options(synchronize_session="fetch")
        )
        return self._execute_write(statement) > 0

    def delete(self, activity_id: str) -> bool:
        statement = (
            delete(ActivityModel)
            .where(ActivityModel.id == activity_id)
            .execution_options(synchronize_session="fetch")
        )
        return self._execute_write(statement) > 0

    def _execute_write(self, statement: Any) -> int:
        try:
            result = self.session.execute(statement)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return result.rowcount or 0

    @staticmethod
    def _column_values(activity: Activity) -> dict[str, Any]:
        return {
            "title": activity.title,
            "date": ensure_utc_naive_datetime(activity.date),
            "date_utc_offset": utc_offset_minutes(activity.date),
            "description": activity.description,
            "category": activity.category,
            "city": activity.city,
            "venue": activity.venue,
            "latitude": activity.latitude,
            "longitude": activity.longitude,
        }

    @classmethod
    def _apply_entity_to_model(cls, model: ActivityModel, activity: Activity) -> None:
        for column, value in cls._column_values(activity).items():
            setattr(model, column, value)

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            title=model.title,
            date=restore_utc_offset(model.date, model.date_utc_offset),
            description=model.description,
            category=model.category,
            city=model.city,
            venue=model.venue,
            latitude=model.latitude,
            longitude=model.longitude,
        )


__all__ = ["ActivityRepository"]
