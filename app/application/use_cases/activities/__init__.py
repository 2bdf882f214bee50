"""Commands and queries for managing activities."""

from app.application.mediator import Handler

from .create_activity import CreateActivity, create_activity
from .delete_activity import DeleteActivity, delete_activity
from .edit_activity import EditActivity, edit_activity
from .get_activity import GetActivity, get_activity
from .list_activities import ListActivities, list_activities

ACTIVITY_HANDLERS: dict[type, Handler] = {
    ListActivities: list_activities,
    GetActivity: get_activity,
    CreateActivity: create_activity,
    EditActivity: edit_activity,
    DeleteActivity: delete_activity,
}

__all__ = [
    "ACTIVITY_HANDLERS",
    "CreateActivity",
    "DeleteActivity",
    "EditActivity",
    "GetActivity",
    "ListActivities",
    "create_activity",
    "delete_activity",
    "edit_activity",
    "get_activity",
    "list_activities",
]
