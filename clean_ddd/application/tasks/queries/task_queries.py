"""Task queries та read-side port."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from clean_ddd.application.shared import Query
from clean_ddd.application.tasks.dtos import TaskDTO


@dataclass(frozen=True)
class GetTaskQuery(Query):
    task_id: str


@dataclass(frozen=True)
class ListTasksQuery(Query):
    """List tasks; з user_id - тільки tasks цього user."""

    user_id: Optional[str] = None


class TaskQueries(ABC):
    """Read model port для tasks.

    Пошук за owner живе тут, а не в TaskRepository: repository
    повертає aggregates тільки за identity.
    """

    @abstractmethod
    async def get(self, task_id: str) -> Optional[TaskDTO]:
        pass

    @abstractmethod
    async def list_all(self) -> list[TaskDTO]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[TaskDTO]:
        pass
