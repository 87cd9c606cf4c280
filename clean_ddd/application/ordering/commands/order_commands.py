"""Commands для змін існуючого order."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from clean_ddd.application.shared import Command

from .place_order import AddressInput


@dataclass(frozen=True)
class AddOrderItemCommand(Command):
    order_id: str
    product_id: str
    unit_price: Decimal
    quantity: int
    currency: Optional[str] = None
    """Валюта ціни; None → валюта order."""


@dataclass(frozen=True)
class RemoveOrderItemCommand(Command):
    order_id: str
    product_id: str


@dataclass(frozen=True)
class SetShippingAddressCommand(Command):
    order_id: str
    address: AddressInput


@dataclass(frozen=True)
class ConfirmOrderCommand(Command):
    order_id: str


@dataclass(frozen=True)
class ShipOrderCommand(Command):
    order_id: str
    tracking_number: str


@dataclass(frozen=True)
class DeliverOrderCommand(Command):
    order_id: str


@dataclass(frozen=True)
class CancelOrderCommand(Command):
    order_id: str
    reason: str
