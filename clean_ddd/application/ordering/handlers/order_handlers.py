"""Handlers для змін існуючого order.

Всі мають однаковий flow, різниться тільки метод aggregate:
load → mutate → save → commit → clear pending events.
"""

import logging
from abc import abstractmethod
from typing import TypeVar

from clean_ddd.application.ordering.commands import (
    AddOrderItemCommand,
    CancelOrderCommand,
    ConfirmOrderCommand,
    DeliverOrderCommand,
    RemoveOrderItemCommand,
    SetShippingAddressCommand,
    ShipOrderCommand,
)
from clean_ddd.application.ordering.dtos import OrderDTO
from clean_ddd.application.shared import Command, CommandHandler, UnitOfWork
from clean_ddd.domain.ordering import Order, OrderId, ProductId
from clean_ddd.domain.shared import AggregateNotFound, Money

from .place_order_handler import to_shipping_address

logger = logging.getLogger(__name__)

TOrderCommand = TypeVar("TOrderCommand", bound=Command)


class OrderCommandHandler(CommandHandler[TOrderCommand, OrderDTO]):
    """Template для handlers що змінюють один Order.

    Якщо метод aggregate кинув exception - commit не відбувається,
    UoW робить rollback, events лишаються в буфері (aggregate відкидається).
    """

    event_name = "order.updated"

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: TOrderCommand) -> OrderDTO:
        order_id = OrderId(command.order_id)  # type: ignore[attr-defined]

        async with self.uow:
            order = await self.uow.orders.get_by_id(order_id)
            if order is None:
                raise AggregateNotFound("Order not found", order_id=str(order_id))

            self.apply(order, command)

            await self.uow.orders.save(order)
            await self.uow.commit()
            order.clear_pending_events()

        logger.info(
            self.event_name,
            extra={
                "order_id": str(order.id),
                "status": order.status.value,
                "version": order.version,
            },
        )
        return OrderDTO.from_entity(order)

    @abstractmethod
    def apply(self, order: Order, command: TOrderCommand) -> None:
        """Call exactly one intention-revealing method on the order."""


class AddOrderItemHandler(OrderCommandHandler[AddOrderItemCommand]):
    event_name = "order.item_added"

    def apply(self, order: Order, command: AddOrderItemCommand) -> None:
        order.add_item(
            product_id=ProductId(command.product_id),
            unit_price=Money(command.unit_price, command.currency or order.currency),
            quantity=command.quantity,
        )


class RemoveOrderItemHandler(OrderCommandHandler[RemoveOrderItemCommand]):
    event_name = "order.item_removed"

    def apply(self, order: Order, command: RemoveOrderItemCommand) -> None:
        order.remove_item(ProductId(command.product_id))


class SetShippingAddressHandler(OrderCommandHandler[SetShippingAddressCommand]):
    event_name = "order.shipping_address_set"

    def apply(self, order: Order, command: SetShippingAddressCommand) -> None:
        order.set_shipping_address(to_shipping_address(command.address))


class ConfirmOrderHandler(OrderCommandHandler[ConfirmOrderCommand]):
    event_name = "order.confirmed"

    def apply(self, order: Order, command: ConfirmOrderCommand) -> None:
        order.confirm()


class ShipOrderHandler(OrderCommandHandler[ShipOrderCommand]):
    event_name = "order.shipped"

    def apply(self, order: Order, command: ShipOrderCommand) -> None:
        order.ship(command.tracking_number)


class DeliverOrderHandler(OrderCommandHandler[DeliverOrderCommand]):
    event_name = "order.delivered"

    def apply(self, order: Order, command: DeliverOrderCommand) -> None:
        order.deliver()


class CancelOrderHandler(OrderCommandHandler[CancelOrderCommand]):
    event_name = "order.cancelled"

    def apply(self, order: Order, command: CancelOrderCommand) -> None:
        order.cancel(command.reason)
