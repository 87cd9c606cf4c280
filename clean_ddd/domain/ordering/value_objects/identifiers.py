"""Identifiers для Ordering bounded context."""

from dataclasses import dataclass
from typing import ClassVar

from clean_ddd.domain.shared import Identifier


@dataclass(frozen=True)
class OrderId(Identifier):
    entity_name: ClassVar[str] = "Order"


@dataclass(frozen=True)
class OrderItemId(Identifier):
    entity_name: ClassVar[str] = "Order item"


@dataclass(frozen=True)
class CustomerId(Identifier):
    """Customer aggregate живе в іншому context, тут тільки його ID."""

    entity_name: ClassVar[str] = "Customer"


@dataclass(frozen=True)
class ProductId(Identifier):
    """Product з catalog context, посилання тільки за ID."""

    entity_name: ClassVar[str] = "Product"
