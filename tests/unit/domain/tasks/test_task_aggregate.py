"""Tests для Task aggregate."""

import pytest

from clean_ddd.domain.shared import InvalidStateTransition, UserId, ValidationError
from clean_ddd.domain.tasks import (
    Task,
    TaskCompleted,
    TaskCreated,
    TaskDeleted,
    TaskId,
)


@pytest.fixture
def task() -> Task:
    task = Task.create(TaskId("t-1"), UserId("u-1"), "Write report")
    task.clear_pending_events()
    return task


def test_create_emits_event():
    task = Task.create(TaskId("t-1"), UserId("u-1"), " Write report ", "quarterly")

    assert task.title == "Write report"
    assert task.description == "quarterly"
    assert not task.is_completed
    (event,) = task.pending_events()
    assert isinstance(event, TaskCreated)
    assert event.user_id == "u-1"


def test_empty_title_rejected():
    with pytest.raises(ValidationError):
        Task.create(TaskId("t-1"), UserId("u-1"), "")


def test_complete(task):
    task.complete()

    assert task.is_completed
    (event,) = task.pending_events()
    assert isinstance(event, TaskCompleted)


def test_complete_twice_rejected(task):
    task.complete()
    task.clear_pending_events()

    with pytest.raises(InvalidStateTransition):
        task.complete()

    assert task.pending_events() == ()


def test_delete(task):
    task.delete()

    assert task.is_deleted
    (event,) = task.pending_events()
    assert isinstance(event, TaskDeleted)

    with pytest.raises(InvalidStateTransition):
        task.complete()
