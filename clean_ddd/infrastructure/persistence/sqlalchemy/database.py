"""Database - async engine + session factory для SQLAlchemy adapters.

In-memory SQLite (default) живе в одному з'єднанні (StaticPool), яке ділять
всі sessions. Тому межі транзакцій (flush + commit, rollback, close)
виконуються під `transaction_guard`, інакше rollback однієї session
відкотив би незакомічений flush іншої. Для file/server databases кожна
session має власне з'єднання і guard нічого не блокує.
"""

import asyncio
import contextlib
import logging
from typing import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from clean_ddd.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine, session factory та schema management.

    Example:
        >>> database = Database("sqlite+aiosqlite:///:memory:")
        >>> await database.create_all()
        >>> uow = SQLAlchemyUnitOfWork(database)
        >>> ...
        >>> await database.dispose()
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        parsed = make_url(url)
        self.url = parsed
        self.shares_connection = parsed.get_backend_name() == "sqlite" and (
            parsed.database in (None, "", ":memory:")
        )

        if self.shares_connection:
            self.engine: AsyncEngine = create_async_engine(
                parsed, echo=echo, poolclass=StaticPool
            )
        else:
            self.engine = create_async_engine(parsed, echo=echo, pool_pre_ping=True)

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Важливо для async
            autoflush=False,  # flush тільки в commit
        )
        self._transaction_lock = asyncio.Lock() if self.shares_connection else None

    def transaction_guard(self) -> contextlib.AbstractAsyncContextManager[None]:
        """Serialize transaction boundaries на спільному з'єднанні."""
        if self._transaction_lock is None:
            return contextlib.nullcontext()
        return self._transaction_lock

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Short-lived session (read side, outbox updates)."""
        session = self.session_factory()
        try:
            yield session
        finally:
            async with self.transaction_guard():
                await session.close()

    async def create_all(self) -> None:
        """Create tables (для development та tests; без migrations)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "database.tables_created",
            extra={"backend": self.url.get_backend_name()},
        )

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.debug("database.disposed")
