"""Tasks Bounded Context - Domain Layer."""

from .entities import Task
from .events import (
    TASK_EVENT_TYPES,
    TaskCompleted,
    TaskCreated,
    TaskDeleted,
    TaskEvent,
)
from .repositories import TaskRepository
from .value_objects import TaskId

__all__ = [
    "Task",
    "TaskId",
    "TaskEvent",
    "TASK_EVENT_TYPES",
    "TaskCreated",
    "TaskCompleted",
    "TaskDeleted",
    "TaskRepository",
]
