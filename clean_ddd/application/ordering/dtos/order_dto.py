"""Order DTOs - data transfer objects для відповідей application layer."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from clean_ddd.domain.ordering import Order


@dataclass
class OrderLineDTO:
    item_id: str
    product_id: str
    unit_price: Decimal
    currency: str
    quantity: int
    subtotal: Decimal


@dataclass
class OrderDTO:
    """Order data transfer object.

    Використовується між layers. Immutable за домовленістю, без business logic.
    """

    id: str
    customer_id: str
    status: str
    currency: str
    lines: list[OrderLineDTO]
    total: Optional[Decimal]
    """None поки рядки в різних валютах (confirm такий order відхилить)."""
    shipping_address: Optional[dict[str, str]]
    tracking_number: Optional[str]
    cancellation_reason: Optional[str]
    created_at: datetime
    version: int

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        """Convert Order aggregate to DTO."""
        address = order.shipping_address
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            status=order.status.value,
            currency=order.currency,
            lines=[
                OrderLineDTO(
                    item_id=str(line.item_id),
                    product_id=str(line.product_id),
                    unit_price=line.unit_price.amount,
                    currency=line.unit_price.currency,
                    quantity=line.quantity.value,
                    subtotal=line.subtotal.amount,
                )
                for line in order.lines
            ],
            total=(
                order.total.amount
                if all(line.unit_price.currency == order.currency for line in order.lines)
                else None
            ),
            shipping_address=(
                {
                    "recipient": address.recipient,
                    "street": address.street,
                    "city": address.city,
                    "postal_code": address.postal_code,
                    "country": address.country,
                }
                if address is not None
                else None
            ),
            tracking_number=order.tracking_number,
            cancellation_reason=order.cancellation_reason,
            created_at=order.created_at,
            version=order.version,
        )
