"""Behaviour of the activity commands and queries."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from app.application.use_cases.activities import (
    CreateActivity,
    DeleteActivity,
    EditActivity,
    GetActivity,
    ListActivities,
    create_activity,
    delete_activity,
    edit_activity,
    get_activity,
    list_activities,
)
from app.domain.exceptions import ActivityNotFoundError, ActivityWriteError
from app.infrastructure.repositories import ActivityRepository
from conftest import make_activity


def test_create_then_get_returns_the_same_activity(session) -> None:
    activity = make_activity("42")

    assert create_activity(session, CreateActivity(activity)) == "42"
    assert get_activity(session, GetActivity("42")) == activity


def test_create_generates_an_id_when_missing(session) -> None:
    activity_id = create_activity(session, CreateActivity(make_activity(None)))

    assert activity_id
    assert get_activity(session, GetActivity(activity_id)).title == "Run"


def test_create_duplicate_raises_write_error(session) -> None:
    create_activity(session, CreateActivity(make_activity("1")))

    with pytest.raises(ActivityWriteError):
        create_activity(session, CreateActivity(make_activity("1")))


@pytest.mark.parametrize("activity_id", ["nope", "1 ", "0"])
def test_unknown_ids_are_not_found(session, activity_id: str) -> None:
    create_activity(session, CreateActivity(make_activity("1")))

    with pytest.raises(ActivityNotFoundError):
        get_activity(session, GetActivity(activity_id))
    with pytest.raises(ActivityNotFoundError):
        delete_activity(session, DeleteActivity(activity_id))


def test_second_delete_is_not_found(session) -> None:
    create_activity(session, CreateActivity(make_activity("1")))
    delete_activity(session, DeleteActivity("1"))

    with pytest.raises(ActivityNotFoundError) as exc_info:
        delete_activity(session, DeleteActivity("1"))
    assert exc_info.value.activity_id == "1"


def test_list_reflects_create_and_delete(session) -> None:
    activity = make_activity("1")
    create_activity(session, CreateActivity(activity))
    assert activity in list_activities(session, ListActivities())

    delete_activity(session, DeleteActivity("1"))
    assert activity not in list_activities(session, ListActivities())


def test_edit_replaces_all_fields(session) -> None:
    create_activity(session, CreateActivity(make_activity("1")))
    edited = replace(
        make_activity("1"),
        title="Cinema",
        date=datetime(2025, 3, 3, 20, 0),
        description="Late show",
        category="film",
        city="Paris",
        venue="Le Grand Rex",
        latitude=48.870,
        longitude=2.347,
    )

    assert edit_activity(session, EditActivity(edited)) is None
    assert get_activity(session, GetActivity("1")) == edited


def test_edit_missing_activity_is_not_found(session) -> None:
    with pytest.raises(ActivityNotFoundError):
        edit_activity(session, EditActivity(make_activity("ghost")))
    assert ActivityRepository(session).is_empty()


def test_delete_reports_write_error_when_nothing_was_removed(session, monkeypatch) -> None:
    create_activity(session, CreateActivity(make_activity("1")))
    monkeypatch.setattr(ActivityRepository, "delete", lambda self, activity_id: False)

    with pytest.raises(ActivityWriteError, match="Problem saving changes"):
        delete_activity(session, DeleteActivity("1"))


def test_edit_reports_write_error_when_nothing_was_updated(session, monkeypatch) -> None:
    create_activity(session, CreateActivity(make_activity("1")))
    monkeypatch.setattr(ActivityRepository, "update", lambda self, activity: False)

    with pytest.raises(ActivityWriteError):
        edit_activity(session, EditActivity(make_activity("1", title="Other")))
