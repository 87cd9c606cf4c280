"""Consumers of events from other bounded contexts."""

from .remove_user_tasks import RemoveTasksOfDeletedUser

__all__ = ["RemoveTasksOfDeletedUser"]
