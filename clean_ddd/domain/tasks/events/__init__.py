"""Events для Tasks bounded context."""

from .task_events import (
    TASK_EVENT_TYPES,
    TaskCompleted,
    TaskCreated,
    TaskDeleted,
    TaskEvent,
)

__all__ = [
    "TaskEvent",
    "TASK_EVENT_TYPES",
    "TaskCreated",
    "TaskCompleted",
    "TaskDeleted",
]
