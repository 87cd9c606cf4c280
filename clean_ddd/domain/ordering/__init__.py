"""Ordering Bounded Context - Domain Layer.

Exports:
    Entities: Order (Aggregate Root), OrderItem, OrderLine
    Value Objects: OrderStatus, OrderId, CustomerId, ProductId, ShippingAddress
    Exceptions: InvalidOrderStateError, EmptyOrderError, OrderItemNotFoundError
    Events: OrderCreated ... OrderCancelled (closed union OrderEvent)
    Repositories: OrderRepository (interface)
"""

# Entities
from .entities import Order, OrderItem, OrderLine

# Value Objects
from .value_objects import (
    CustomerId,
    OrderId,
    OrderItemId,
    OrderStatus,
    ProductId,
    ShippingAddress,
)

# Exceptions
from .exceptions import (
    EmptyOrderError,
    InvalidOrderStateError,
    OrderItemNotFoundError,
    ShippingAddressRequiredError,
)

# Events
from .events import (
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

# Repository interfaces
from .repositories import OrderRepository

__all__ = [
    # Entities
    "Order",
    "OrderItem",
    "OrderLine",
    # Value Objects
    "OrderStatus",
    "OrderId",
    "OrderItemId",
    "CustomerId",
    "ProductId",
    "ShippingAddress",
    # Exceptions
    "InvalidOrderStateError",
    "ShippingAddressRequiredError",
    "EmptyOrderError",
    "OrderItemNotFoundError",
    # Events
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
    # Repositories
    "OrderRepository",
]
