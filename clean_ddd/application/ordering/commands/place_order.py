"""PlaceOrder Command - створити новий order в DRAFT."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from clean_ddd.application.shared import Command


@dataclass(frozen=True)
class AddressInput:
    """Primitive shipping address payload (з API/CLI)."""

    recipient: str
    street: str
    city: str
    postal_code: str
    country: str


@dataclass(frozen=True)
class OrderItemInput:
    product_id: str
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True)
class PlaceOrderCommand(Command):
    """Command для створення order.

    Example:
        >>> command = PlaceOrderCommand(
        ...     customer_id="c-1",
        ...     items=(OrderItemInput("p-1", Decimal("10"), 2),),
        ... )
        >>> order_dto = await handler.handle(command)
        >>> order_dto.status
        'draft'
    """

    customer_id: str
    """ID клієнта (інший aggregate, тільки посилання)."""

    currency: Optional[str] = None
    """Валюта order; None → settings.default_currency."""

    shipping_address: Optional[AddressInput] = None

    items: tuple[OrderItemInput, ...] = field(default_factory=tuple)
    """Початкові рядки (кожен додається через Order.add_item)."""
