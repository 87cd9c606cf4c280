"""Base Handler classes для Commands та Queries.

Handler - orchestrates domain logic для виконання use case.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command
from .query import Query

TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class для command handlers.

    Command Handler відповідає за:
    - Load aggregate з repository (або створити через factory)
    - Execute domain logic (один метод aggregate)
    - Save через Unit of Work (state + outbox в одному commit)
    - Clear pending events тільки після успішного commit

    Example:
        >>> class ConfirmOrderHandler(CommandHandler[ConfirmOrderCommand, OrderDTO]):
        ...     def __init__(self, uow: UnitOfWork):
        ...         self.uow = uow
        ...
        ...     async def handle(self, command: ConfirmOrderCommand) -> OrderDTO:
        ...         async with self.uow:
        ...             order = await self.uow.orders.get_by_id(OrderId(command.order_id))
        ...             order.confirm()
        ...             await self.uow.orders.save(order)
        ...             await self.uow.commit()
        ...         order.clear_pending_events()
        ...         return OrderDTO.from_entity(order)

    Retries (наприклад після ConcurrencyException) - відповідальність
    caller, handler нічого не повторює сам.
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle command and return result.

        Args:
            command: Command to handle.

        Returns:
            Result of command execution.

        Raises:
            DomainException: If business rule violated.
        """
        pass


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class для query handlers.

    Query Handler відповідає за:
    - Fetch data з read model
    - Transform to DTOs
    - NO side effects (read-only)
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Handle query and return result.

        Note:
            Queries MUST NOT have side effects.
        """
        pass
