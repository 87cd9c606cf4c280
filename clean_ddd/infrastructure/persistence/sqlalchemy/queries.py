"""Read-side adapters - SELECT напряму в DTO, без aggregates."""

from typing import Optional

from sqlalchemy import select

from clean_ddd.application.tasks import TaskDTO, TaskQueries
from clean_ddd.application.users import UserDTO, UserQueries
from clean_ddd.infrastructure.persistence.sqlalchemy.database import Database
from clean_ddd.infrastructure.persistence.sqlalchemy.models import TaskModel, UserModel


def _user_dto(model: UserModel) -> UserDTO:
    return UserDTO(
        id=model.id,
        name=model.name,
        email=model.email,
        created_at=model.created_at,
        updated_at=model.updated_at,
        version=model.version,
    )


def _task_dto(model: TaskModel) -> TaskDTO:
    return TaskDTO(
        id=model.id,
        user_id=model.user_id,
        title=model.title,
        description=model.description,
        completed=model.completed,
        created_at=model.created_at,
        updated_at=model.updated_at,
        version=model.version,
    )


class SQLAlchemyUserQueries(UserQueries):
    def __init__(self, database: Database) -> None:
        self._database = database

    async def get(self, user_id: str) -> Optional[UserDTO]:
        async with self._database.session() as session:
            model = await session.get(UserModel, user_id)
            return _user_dto(model) if model is not None else None

    async def list_all(self) -> list[UserDTO]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [_user_dto(model) for model in result.scalars().all()]


class SQLAlchemyTaskQueries(TaskQueries):
    """Tasks read model; list_by_user йде через ix_tasks_user_created."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def get(self, task_id: str) -> Optional[TaskDTO]:
        async with self._database.session() as session:
            model = await session.get(TaskModel, task_id)
            return _task_dto(model) if model is not None else None

    async def list_all(self) -> list[TaskDTO]:
        stmt = select(TaskModel).order_by(TaskModel.created_at, TaskModel.id)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [_task_dto(model) for model in result.scalars().all()]

    async def list_by_user(self, user_id: str) -> list[TaskDTO]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.user_id == user_id)
            .order_by(TaskModel.created_at, TaskModel.id)
        )
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [_task_dto(model) for model in result.scalars().all()]
