"""Data Transfer Objects for task use cases."""

from .task_dto import TaskDTO

__all__ = ["TaskDTO"]
