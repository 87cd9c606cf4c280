"""SQLAlchemy implementation of OrderRepository."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from clean_ddd.domain.ordering import Order, OrderId
from clean_ddd.domain.ordering import OrderRepository as OrderRepositoryPort
from clean_ddd.infrastructure.persistence.sqlalchemy.mappers import OrderMapper
from clean_ddd.infrastructure.persistence.sqlalchemy.models import OrderModel

from .base import SQLAlchemyRepository, StagedChanges


class SQLAlchemyOrderRepository(SQLAlchemyRepository[Order], OrderRepositoryPort):
    """SQLAlchemy implementation of OrderRepository port.

    Використовує:
    - AsyncSession для async DB operations
    - OrderMapper для Domain ↔ ORM conversion
    - version column для optimistic locking

    Example:
        >>> async with uow:
        ...     order = await uow.orders.get_by_id(order_id)
        ...     order.confirm()
        ...     await uow.orders.save(order)
        ...     await uow.commit()
    """

    model_class = OrderModel

    def __init__(self, session: AsyncSession, staged: StagedChanges) -> None:
        super().__init__(session, staged, OrderMapper())

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        return await self._load(str(order_id))

    async def save(self, order: Order) -> None:
        """Save або update order.

        Note:
            - Якщо order.version == 0 → INSERT
            - Інакше → UPDATE з optimistic locking
        """
        await self._save(order)

    def next_identity(self) -> OrderId:
        return OrderId.generate()
