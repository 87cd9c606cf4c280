"""Events для Ordering bounded context."""

from .order_events import (
    ORDER_EVENT_TYPES,
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderEvent,
    OrderItemAdded,
    OrderItemRemoved,
    OrderShipped,
    ShippingAddressSet,
)

__all__ = [
    "OrderEvent",
    "ORDER_EVENT_TYPES",
    "OrderCreated",
    "OrderItemAdded",
    "OrderItemRemoved",
    "ShippingAddressSet",
    "OrderConfirmed",
    "OrderShipped",
    "OrderDelivered",
    "OrderCancelled",
]
