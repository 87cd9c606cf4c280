"""Task application layer."""

from .commands import CompleteTaskCommand, CreateTaskCommand, DeleteTaskCommand
from .dtos import TaskDTO
from .queries import GetTaskQuery, ListTasksQuery, TaskQueries
from .handlers import (
    CompleteTaskHandler,
    CreateTaskHandler,
    DeleteTaskHandler,
    GetTaskHandler,
    ListTasksHandler,
)
from .consumers import RemoveTasksOfDeletedUser

__all__ = [
    "CreateTaskCommand",
    "CompleteTaskCommand",
    "DeleteTaskCommand",
    "GetTaskQuery",
    "ListTasksQuery",
    "TaskQueries",
    "TaskDTO",
    "CreateTaskHandler",
    "CompleteTaskHandler",
    "DeleteTaskHandler",
    "GetTaskHandler",
    "ListTasksHandler",
    "RemoveTasksOfDeletedUser",
]
