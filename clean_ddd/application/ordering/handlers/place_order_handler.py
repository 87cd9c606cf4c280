"""PlaceOrder Handler - створити order через factory та зберегти."""

import logging
from typing import Optional

from clean_ddd.application.ordering.commands import AddressInput, PlaceOrderCommand
from clean_ddd.application.ordering.dtos import OrderDTO
from clean_ddd.application.shared import CommandHandler, UnitOfWork
from clean_ddd.domain.ordering import CustomerId, Order, ProductId, ShippingAddress
from clean_ddd.domain.shared import Money

logger = logging.getLogger(__name__)


def to_shipping_address(data: Optional[AddressInput]) -> Optional[ShippingAddress]:
    """Convert primitive payload to ShippingAddress value object."""
    if data is None:
        return None
    return ShippingAddress(
        recipient=data.recipient,
        street=data.street,
        city=data.city,
        postal_code=data.postal_code,
        country=data.country,
    )


class PlaceOrderHandler(CommandHandler[PlaceOrderCommand, OrderDTO]):
    """Handler для PlaceOrder command.

    Flow:
    1. Validate inputs (value objects)
    2. Order.create (OrderCreated), адреса (ShippingAddressSet),
       add_item для кожного рядка (OrderItemAdded)
    3. Save + commit (state і outbox разом)
    4. Clear pending events
    """

    def __init__(self, uow: UnitOfWork, default_currency: str) -> None:
        """Initialize handler.

        Args:
            uow: Unit of Work для transaction management.
            default_currency: Валюта коли command її не задає.
        """
        self.uow = uow
        self.default_currency = default_currency

    async def handle(self, command: PlaceOrderCommand) -> OrderDTO:
        currency = command.currency or self.default_currency

        async with self.uow:
            order = Order.create(
                order_id=self.uow.orders.next_identity(),
                customer_id=CustomerId(command.customer_id),
                currency=currency,
            )
            address = to_shipping_address(command.shipping_address)
            if address is not None:
                order.set_shipping_address(address)
            for item in command.items:
                order.add_item(
                    product_id=ProductId(item.product_id),
                    unit_price=Money(item.unit_price, order.currency),
                    quantity=item.quantity,
                )

            await self.uow.orders.save(order)
            await self.uow.commit()
            order.clear_pending_events()

        logger.info(
            "order.placed",
            extra={
                "order_id": str(order.id),
                "customer_id": command.customer_id,
                "items_count": order.item_count,
            },
        )
        return OrderDTO.from_entity(order)
