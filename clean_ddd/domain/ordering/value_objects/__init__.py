"""Value objects для Ordering bounded context."""

from .enums import OrderStatus
from .identifiers import CustomerId, OrderId, OrderItemId, ProductId
from .shipping_address import ShippingAddress

__all__ = [
    "OrderStatus",
    "OrderId",
    "OrderItemId",
    "CustomerId",
    "ProductId",
    "ShippingAddress",
]
