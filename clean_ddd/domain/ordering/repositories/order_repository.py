"""OrderRepository Port - interface для persistence Order aggregate.

Це PORT в Hexagonal Architecture (domain визначає interface).
Infrastructure layer має implement цей interface.

Один repository на aggregate type: без query-by-arbitrary-field.
Списки та фільтри - це read side (queries / projections).
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Order
from ..value_objects import OrderId


class OrderRepository(ABC):
    """Abstract interface для order persistence.

    Example (Application uses):
        >>> async with uow:
        ...     order = await uow.orders.get_by_id(order_id)
        ...     order.confirm()
        ...     await uow.orders.save(order)
        ...     await uow.commit()
        ...     order.clear_pending_events()
    """

    @abstractmethod
    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Get order by ID.

        Returns:
            Order aggregate (з порожнім буфером events) або None.
        """
        pass

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Insert або update order з optimistic locking.

        Pending events order потрапляють в outbox тієї ж транзакції.

        Raises:
            ConcurrencyException: Якщо збережена версія вже новіша за
                `order.version` (хтось зберіг order після нашого load).
        """
        pass

    @abstractmethod
    def next_identity(self) -> OrderId:
        """Generate fresh unique OrderId."""
        pass
