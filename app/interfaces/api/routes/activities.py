"""Routes for managing activities."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.application.mediator import Mediator
from app.application.use_cases.activities import (
    CreateActivity,
    DeleteActivity,
    EditActivity,
    GetActivity,
    ListActivities,
)
from app.domain.exceptions import ActivityNotFoundError, ActivityWriteError
from app.interfaces.api.dependencies import get_mediator
from app.interfaces.api.schemas import ActivityCreate, ActivityRead, ActivityUpdate

router = APIRouter(prefix="/api/activities", tags=["activities"])


def _require_activity_id(activity_id: str) -> str:
    if not activity_id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Activity id is required"
        )
    return activity_id


def _send(mediator: Mediator, request: object) -> object:
    """Dispatch ``request`` and translate domain errors into HTTP errors."""

    try:
        return mediator.send(request)
    except ActivityNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ActivityWriteError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc


@router.get("", response_model=list[ActivityRead])
def list_activities(mediator: Mediator = Depends(get_mediator)) -> list[ActivityRead]:
    """Devuelve todas las actividades registradas."""

    activities = _send(mediator, ListActivities())
    return [ActivityRead.model_validate(activity) for activity in activities]


@router.api_route("/", methods=["GET", "DELETE"], include_in_schema=False)
def reject_missing_activity_id() -> None:
    _require_activity_id("")


@router.get("/{activity_id}", response_model=ActivityRead)
def read_activity(
    activity_id: str,
    mediator: Mediator = Depends(get_mediator),
) -> ActivityRead:
    """Obtiene la actividad identificada por ``activity_id``."""

    activity = _send(mediator, GetActivity(id=_require_activity_id(activity_id)))
    return ActivityRead.model_validate(activity)


@router.post("", response_model=str)
def create_activity(
    activity_in: ActivityCreate,
    mediator: Mediator = Depends(get_mediator),
) -> str:
    """Registra una actividad y devuelve su identificador."""

    return _send(mediator, CreateActivity(activity=activity_in.to_entity()))


@router.put("", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def edit_activity(
    activity_in: ActivityUpdate,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Reemplaza todos los campos de una actividad existente."""

    _send(mediator, EditActivity(activity=activity_in.to_entity()))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{activity_id}", response_class=Response)
def delete_activity(
    activity_id: str,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Elimina una actividad."""

    _send(mediator, DeleteActivity(id=_require_activity_id(activity_id)))
    return Response(status_code=status.HTTP_200_OK)
