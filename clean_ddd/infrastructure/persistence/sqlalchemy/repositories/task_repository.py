"""SQLAlchemy implementation of TaskRepository."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from clean_ddd.domain.tasks import Task, TaskId
from clean_ddd.domain.tasks import TaskRepository as TaskRepositoryPort
from clean_ddd.infrastructure.persistence.sqlalchemy.mappers import TaskMapper
from clean_ddd.infrastructure.persistence.sqlalchemy.models import TaskModel

from .base import SQLAlchemyRepository, StagedChanges


class SQLAlchemyTaskRepository(SQLAlchemyRepository[Task], TaskRepositoryPort):
    model_class = TaskModel

    def __init__(self, session: AsyncSession, staged: StagedChanges) -> None:
        super().__init__(session, staged, TaskMapper())

    async def get_by_id(self, task_id: TaskId) -> Optional[Task]:
        return await self._load(str(task_id))

    async def save(self, task: Task) -> None:
        await self._save(task)

    async def remove(self, task: Task) -> None:
        await self._remove(task)

    def next_identity(self) -> TaskId:
        return TaskId.generate()
