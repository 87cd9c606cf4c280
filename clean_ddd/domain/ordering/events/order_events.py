"""Domain Events для Ordering bounded context.

Набір подій Order закритий: `OrderEvent` - union всіх варіантів,
`ORDER_EVENT_TYPES` - ті ж класи як tuple для runtime перевірок
(projections повинні обробляти кожен варіант).
"""

from dataclasses import dataclass
from typing import ClassVar, Union, get_args

from clean_ddd.domain.shared import DomainEvent, Money

from ..value_objects import ShippingAddress


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Event: новий order в DRAFT."""

    kind: ClassVar[str] = "order.created"

    customer_id: str
    currency: str


@dataclass(frozen=True)
class OrderItemAdded(DomainEvent):
    """Event: item додано (або кількість злито в існуючий рядок).

    `quantity` - скільки додано цією операцією,
    `line_quantity` - кількість в рядку після злиття.
    """

    kind: ClassVar[str] = "order.item_added"

    product_id: str
    quantity: int
    line_quantity: int
    unit_price: Money


@dataclass(frozen=True)
class OrderItemRemoved(DomainEvent):
    kind: ClassVar[str] = "order.item_removed"

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ShippingAddressSet(DomainEvent):
    kind: ClassVar[str] = "order.shipping_address_set"

    address: ShippingAddress


@dataclass(frozen=True)
class OrderConfirmed(DomainEvent):
    """Event: order підтверджений.

    Subscribers можуть:
    - Зарезервувати stock (inventory context)
    - Виставити рахунок на `total`
    """

    kind: ClassVar[str] = "order.confirmed"

    customer_id: str
    total: Money
    item_count: int


@dataclass(frozen=True)
class OrderShipped(DomainEvent):
    kind: ClassVar[str] = "order.shipped"

    tracking_number: str


@dataclass(frozen=True)
class OrderDelivered(DomainEvent):
    kind: ClassVar[str] = "order.delivered"


@dataclass(frozen=True)
class OrderCancelled(DomainEvent):
    """Event: order скасований.

    `previous_status` дозволяє subscribers знати чи треба звільняти
    резерв (тільки якщо order був CONFIRMED).
    """

    kind: ClassVar[str] = "order.cancelled"

    reason: str
    previous_status: str


OrderEvent = Union[
    OrderCreated,
    OrderItemAdded,
    OrderItemRemoved,
    ShippingAddressSet,
    OrderConfirmed,
    OrderShipped,
    OrderDelivered,
    OrderCancelled,
]

ORDER_EVENT_TYPES: tuple[type[DomainEvent], ...] = get_args(OrderEvent)
