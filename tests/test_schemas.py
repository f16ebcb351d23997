"""
Tests for the todo and user schemas
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from todo_planner_api.app.schemas.todo import TodoCreate, TodoUpdate
from todo_planner_api.app.schemas.user import UserCreate


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-01-01", datetime(2025, 1, 1, tzinfo=timezone.utc)),
        ("2025-01-01T08:30:00", datetime(2025, 1, 1, 8, 30, tzinfo=timezone.utc)),
        ("2025-01-01T08:30:00Z", datetime(2025, 1, 1, 8, 30, tzinfo=timezone.utc)),
        (
            "2025-01-01T08:30:00+02:00",
            datetime(2025, 1, 1, 8, 30, tzinfo=timezone(timedelta(hours=2))),
        ),
    ],
)
def test_deadline_parsing(raw, expected):
    deadline = TodoCreate(title="t", deadline=raw).deadline

    assert deadline == expected
    assert deadline.tzinfo is not None


def test_deadline_keeps_given_offset():
    deadline = TodoCreate(title="t", deadline="2025-01-01T08:30:00+02:00").deadline
    assert deadline.utcoffset() == timedelta(hours=2)


def test_create_rejects_unparsable_deadline():
    with pytest.raises(ValidationError):
        TodoCreate(title="t", deadline="next tuesday")


def test_update_treats_empty_deadline_as_missing():
    assert TodoUpdate(deadline="").deadline is None
    assert TodoUpdate().deadline is None


def test_schema_examples_use_examples_list():
    todo_props = TodoCreate.model_json_schema()["properties"]
    user_props = UserCreate.model_json_schema()["properties"]

    assert todo_props["title"]["examples"] == ["Study FastAPI"]
    assert user_props["username"]["examples"] == ["ana"]
