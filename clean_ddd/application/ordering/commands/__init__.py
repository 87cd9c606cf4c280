"""Ordering commands (write operations)."""

from .order_commands import (
    AddOrderItemCommand,
    CancelOrderCommand,
    ConfirmOrderCommand,
    DeliverOrderCommand,
    RemoveOrderItemCommand,
    SetShippingAddressCommand,
    ShipOrderCommand,
)
from .place_order import AddressInput, OrderItemInput, PlaceOrderCommand

__all__ = [
    "AddressInput",
    "OrderItemInput",
    "PlaceOrderCommand",
    "AddOrderItemCommand",
    "RemoveOrderItemCommand",
    "SetShippingAddressCommand",
    "ConfirmOrderCommand",
    "ShipOrderCommand",
    "DeliverOrderCommand",
    "CancelOrderCommand",
]
