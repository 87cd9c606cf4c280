"""Task use case handlers."""

from .task_command_handlers import (
    CompleteTaskHandler,
    CreateTaskHandler,
    DeleteTaskHandler,
)
from .task_query_handlers import GetTaskHandler, ListTasksHandler

__all__ = [
    "CreateTaskHandler",
    "CompleteTaskHandler",
    "DeleteTaskHandler",
    "GetTaskHandler",
    "ListTasksHandler",
]
