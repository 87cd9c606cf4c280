"""TaskRepository Port.

Пошук tasks за власником - це read side (TaskQueries), не repository.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Task
from ..value_objects import TaskId


class TaskRepository(ABC):
    """Abstract interface для task persistence."""

    @abstractmethod
    async def get_by_id(self, task_id: TaskId) -> Optional[Task]:
        pass

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Insert або update task.

        Raises:
            ConcurrencyException: Якщо версія застаріла.
        """
        pass

    @abstractmethod
    async def remove(self, task: Task) -> None:
        """Physically delete task (після `task.delete()`)."""
        pass

    @abstractmethod
    def next_identity(self) -> TaskId:
        pass
