"""Unit of Work pattern - manages transactions.

UnitOfWork забезпечує:
- Atomic operations (all or nothing)
- Transaction boundary (один aggregate на транзакцію)
- Transactional outbox: pending events пишуться в тому ж commit
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from clean_ddd.domain.ordering.repositories import OrderRepository
from clean_ddd.domain.tasks.repositories import TaskRepository
from clean_ddd.domain.users.repositories import UserRepository


class UnitOfWork(ABC):
    """Abstract Unit of Work interface.

    UnitOfWork pattern:
    - **Atomic**: aggregate state + outbox messages в одній транзакції
    - **Consistent**: Commit тільки якщо все успішно
    - **Isolated**: staged зміни не видно іншим UoW до commit
    - **Context Manager**: Use with async context manager

    Example (Use case uses):
        >>> async with uow:
        ...     order = await uow.orders.get_by_id(order_id)
        ...     order.confirm()
        ...     await uow.orders.save(order)  # state + events → outbox
        ...     await uow.commit()
        ...     order.clear_pending_events()  # тільки після успішного commit

    Правило: одна транзакція змінює рівно один aggregate. Вплив на інші
    aggregates - тільки через domain events (eventual consistency).
    """

    @property
    @abstractmethod
    def orders(self) -> OrderRepository:
        pass

    @property
    @abstractmethod
    def users(self) -> UserRepository:
        pass

    @property
    @abstractmethod
    def tasks(self) -> TaskRepository:
        pass

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        """Enter async context manager.

        Returns:
            Self (UnitOfWork instance).
        """
        pass

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Exit async context manager.

        Note:
            Якщо exc_type не None, має викликати rollback().
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit transaction.

        Raises:
            ConcurrencyException: Якщо aggregate змінили паралельно.
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback transaction (discard staged changes)."""
        pass
