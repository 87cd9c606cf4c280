"""Exceptions для Ordering bounded context."""

from clean_ddd.domain.shared import InvalidQuantityError

from .ordering_exceptions import (
    EmptyOrderError,
    InvalidOrderStateError,
    OrderItemNotFoundError,
    ShippingAddressRequiredError,
)

__all__ = [
    "InvalidOrderStateError",
    "ShippingAddressRequiredError",
    "EmptyOrderError",
    "OrderItemNotFoundError",
    "InvalidQuantityError",
]
