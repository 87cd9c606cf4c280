"""Ordering application layer."""

from .commands import (
    AddOrderItemCommand,
    AddressInput,
    CancelOrderCommand,
    ConfirmOrderCommand,
    DeliverOrderCommand,
    OrderItemInput,
    PlaceOrderCommand,
    RemoveOrderItemCommand,
    SetShippingAddressCommand,
    ShipOrderCommand,
)
from .dtos import OrderDTO, OrderLineDTO
from .handlers import (
    AddOrderItemHandler,
    CancelOrderHandler,
    ConfirmOrderHandler,
    DeliverOrderHandler,
    GetOrderHandler,
    GetOrderSummaryHandler,
    PlaceOrderHandler,
    RemoveOrderItemHandler,
    SetShippingAddressHandler,
    ShipOrderHandler,
)
from .projections import OrderSummary, OrderSummaryProjection
from .queries import GetOrderQuery, GetOrderSummaryQuery

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
    "GetOrderQuery",
    "GetOrderSummaryQuery",
    "OrderDTO",
    "OrderLineDTO",
    "OrderSummary",
    "OrderSummaryProjection",
    "PlaceOrderHandler",
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
