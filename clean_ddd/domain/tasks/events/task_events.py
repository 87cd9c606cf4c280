"""Domain Events для Tasks bounded context."""

from dataclasses import dataclass
from typing import ClassVar, Union, get_args

from clean_ddd.domain.shared import DomainEvent


@dataclass(frozen=True)
class TaskCreated(DomainEvent):
    kind: ClassVar[str] = "task.created"

    user_id: str
    title: str


@dataclass(frozen=True)
class TaskCompleted(DomainEvent):
    kind: ClassVar[str] = "task.completed"

    user_id: str


@dataclass(frozen=True)
class TaskDeleted(DomainEvent):
    kind: ClassVar[str] = "task.deleted"

    user_id: str


TaskEvent = Union[TaskCreated, TaskCompleted, TaskDeleted]

TASK_EVENT_TYPES: tuple[type[DomainEvent], ...] = get_args(TaskEvent)
