"""Ordering use case handlers."""

from .get_order_handler import GetOrderHandler, GetOrderSummaryHandler
from .order_handlers import (
    AddOrderItemHandler,
    CancelOrderHandler,
    ConfirmOrderHandler,
    DeliverOrderHandler,
    OrderCommandHandler,
    RemoveOrderItemHandler,
    SetShippingAddressHandler,
    ShipOrderHandler,
)
from .place_order_handler import PlaceOrderHandler

__all__ = [
    "PlaceOrderHandler",
    "OrderCommandHandler",
    "AddOrderItemHandler",
    "RemoveOrderItemHandler",
    "SetShippingAddressHandler",
    "ConfirmOrderHandler",
    "ShipOrderHandler",
    "DeliverOrderHandler",
    "CancelOrderHandler",
    "GetOrderHandler",
    "GetOrderSummaryHandler",
]
