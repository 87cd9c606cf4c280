"""Task queries (read operations)."""

from .task_queries import GetTaskQuery, ListTasksQuery, TaskQueries

__all__ = ["GetTaskQuery", "ListTasksQuery", "TaskQueries"]
