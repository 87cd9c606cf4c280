"""SQLAlchemy Unit of Work implementation."""

import logging
from types import TracebackType
from typing import Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from clean_ddd.application.shared import UnitOfWork
from clean_ddd.domain.ordering import OrderRepository
from clean_ddd.domain.shared import AggregateAlreadyExists, ConcurrencyException
from clean_ddd.domain.tasks import TaskRepository
from clean_ddd.domain.users import UserRepository
from clean_ddd.infrastructure.persistence.sqlalchemy.database import Database
from clean_ddd.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyUserRepository,
    StagedChanges,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of Unit of Work pattern.

    Відповідальності:
    - Нова AsyncSession на кожен `async with`
    - Commit: flush (UPDATE ... WHERE version = ?) + outbox rows + commit
    - Automatic rollback при exceptions (aggregate versions відновлюються)
    - Lazy initialization of repositories

    Один instance можна використовувати послідовно (кожен `async with` -
    нова транзакція), але не з кількох coroutines одночасно.

    Example:
        >>> uow = SQLAlchemyUnitOfWork(database)
        >>> async with uow:
        ...     order = await uow.orders.get_by_id(order_id)
        ...     order.confirm()
        ...     await uow.orders.save(order)
        ...     await uow.commit()  # Single commit: state + outbox
        ...     order.clear_pending_events()
    """

    def __init__(self, database: Database) -> None:
        """Initialize Unit of Work.

        Args:
            database: Engine + session factory.
        """
        self._database = database
        self._session: Optional[AsyncSession] = None
        self._staged = StagedChanges()

        # Repository instances (lazy initialized)
        self._orders: Optional[OrderRepository] = None
        self._users: Optional[UserRepository] = None
        self._tasks: Optional[TaskRepository] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        if self._session is not None:
            raise RuntimeError("Unit of Work already started")

        self._session = self._database.session_factory()
        logger.debug("unit_of_work.started")
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Exit async context manager.

        Note:
            - Якщо exc_type не None → rollback
            - Незакомічені зміни без exception теж відкидаються
            - Завжди закриває session (cleanup)
        """
        try:
            if exc_type is not None:
                await self.rollback()
                logger.warning(
                    "unit_of_work.rolled_back",
                    extra={"exception_type": exc_type.__name__},
                )
            elif self._staged:
                await self.rollback()
                logger.warning("unit_of_work.uncommitted_changes_discarded")
        finally:
            if self._session is not None:
                async with self._database.transaction_guard():
                    await self._session.close()
                self._session = None
                self._orders = None  # Clear repository references
                self._users = None
                self._tasks = None

            logger.debug("unit_of_work.closed")

    async def commit(self) -> None:
        """Commit transaction.

        Raises:
            ConcurrencyException: Aggregate змінили паралельно
                (UPDATE/DELETE не знайшов рядок з очікуваною version).
            AggregateAlreadyExists: Unique constraint порушено.
        """
        session = self._require_session()

        async with self._database.transaction_guard():
            try:
                await session.flush()
                await session.commit()
            except StaleDataError as e:
                await self._discard(session)
                logger.error("unit_of_work.commit_failed", extra={"error": str(e)})
                raise ConcurrencyException(
                    "Aggregate was modified by another transaction"
                ) from e
            except IntegrityError as e:
                await self._discard(session)
                logger.error("unit_of_work.commit_failed", extra={"error": str(e)})
                raise AggregateAlreadyExists(
                    "Unique constraint violated", error=str(e.orig)
                ) from e
            except Exception as e:
                await self._discard(session)
                logger.error("unit_of_work.commit_failed", extra={"error": str(e)})
                raise

        self._staged.clear()
        logger.debug("unit_of_work.committed")

    async def rollback(self) -> None:
        """Rollback transaction.

        Відміняє всі зміни з repositories; aggregate.version повертається
        до значення перед save, pending events не чіпаємо.
        """
        session = self._require_session()
        async with self._database.transaction_guard():
            await self._discard(session)
        logger.debug("unit_of_work.rollback_done")

    async def _discard(self, session: AsyncSession) -> None:
        await session.rollback()
        self._staged.restore_versions()
        self._staged.clear()

    @property
    def orders(self) -> OrderRepository:
        """Get OrderRepository instance.

        Note:
            Lazy initialization - створюється тільки коли потрібно.
        """
        if self._orders is None:
            self._orders = SQLAlchemyOrderRepository(
                self._require_session(), self._staged
            )
        return self._orders

    @property
    def users(self) -> UserRepository:
        if self._users is None:
            self._users = SQLAlchemyUserRepository(
                self._require_session(), self._staged
            )
        return self._users

    @property
    def tasks(self) -> TaskRepository:
        if self._tasks is None:
            self._tasks = SQLAlchemyTaskRepository(
                self._require_session(), self._staged
            )
        return self._tasks

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of Work not started (use async with)")
        return self._session
