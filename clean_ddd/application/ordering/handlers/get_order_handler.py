"""Order query handlers."""

from clean_ddd.application.ordering.dtos import OrderDTO
from clean_ddd.application.ordering.projections import (
    OrderSummary,
    OrderSummaryProjection,
)
from clean_ddd.application.ordering.queries import GetOrderQuery, GetOrderSummaryQuery
from clean_ddd.application.shared import QueryHandler, UnitOfWork
from clean_ddd.domain.ordering import OrderId
from clean_ddd.domain.shared import AggregateNotFound


class GetOrderHandler(QueryHandler[GetOrderQuery, OrderDTO]):
    """Load order through repository (strongly consistent read)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetOrderQuery) -> OrderDTO:
        async with self.uow:
            order = await self.uow.orders.get_by_id(OrderId(query.order_id))

        if order is None:
            raise AggregateNotFound("Order not found", order_id=query.order_id)
        return OrderDTO.from_entity(order)


class GetOrderSummaryHandler(QueryHandler[GetOrderSummaryQuery, OrderSummary]):
    """Read з projection; order може ще не з'явитись до relay."""

    def __init__(self, projection: OrderSummaryProjection) -> None:
        self.projection = projection

    async def handle(self, query: GetOrderSummaryQuery) -> OrderSummary:
        summary = self.projection.get(query.order_id)
        if summary is None:
            raise AggregateNotFound("Order summary not found", order_id=query.order_id)
        return summary
