"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from clean_ddd.domain.shared import AggregateAlreadyExists
from clean_ddd.domain.users import User, UserId
from clean_ddd.domain.users import UserRepository as UserRepositoryPort
from clean_ddd.infrastructure.persistence.sqlalchemy.mappers import UserMapper
from clean_ddd.infrastructure.persistence.sqlalchemy.models import UserModel

from .base import SQLAlchemyRepository, StagedChanges


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepositoryPort):
    """Users table має unique index на lower(email).

    Save перевіряє email заздалегідь; гонку двох commits ловить index
    (IntegrityError → AggregateAlreadyExists в unit of work).
    """

    model_class = UserModel

    def __init__(self, session: AsyncSession, staged: StagedChanges) -> None:
        super().__init__(session, staged, UserMapper())

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._load(str(user_id))

    async def save(self, user: User) -> None:
        await self._save(user)

    async def remove(self, user: User) -> None:
        await self._remove(user)

    def next_identity(self) -> UserId:
        return UserId.generate()

    async def _check_unique(self, key: str, aggregate: User) -> None:
        email = str(aggregate.email)
        stmt = (
            select(UserModel.id)
            .where(func.lower(UserModel.email) == email.lower())
            .where(UserModel.id != key)
            .limit(1)
        )
        if await self._session.scalar(stmt) is not None:
            raise AggregateAlreadyExists("users with this email already exists", email=email)
