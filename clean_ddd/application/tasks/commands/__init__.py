"""Task commands (write operations)."""

from .task_commands import CompleteTaskCommand, CreateTaskCommand, DeleteTaskCommand

__all__ = ["CreateTaskCommand", "CompleteTaskCommand", "DeleteTaskCommand"]
