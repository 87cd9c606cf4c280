"""Order Aggregate Root - consistency boundary для замовлення.

Order контролює свої OrderItem entities, статус та буфер domain events.
Кожна мутація:
1. Перевіряє preconditions проти поточного статусу
2. Застосовує зміну
3. Додає рівно одну domain event

Якщо перевірка не пройшла - exception, стан і буфер не змінюються.
I/O тут немає: persistence і publishing робить application layer.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from clean_ddd.domain.shared import (
    DomainEvent,
    Entity,
    Money,
    PendingEvents,
    Quantity,
    validate_value_object,
)

from ..events.order_events import (
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderItemAdded,
    OrderItemRemoved,
    OrderShipped,
    ShippingAddressSet,
)
from ..exceptions.ordering_exceptions import (
    EmptyOrderError,
    InvalidOrderStateError,
    OrderItemNotFoundError,
    ShippingAddressRequiredError,
)
from ..value_objects import (
    CustomerId,
    OrderId,
    OrderItemId,
    OrderStatus,
    ProductId,
    ShippingAddress,
)
from .order_item import OrderItem, OrderLine


class Order(Entity[OrderId]):
    """Order Aggregate Root.

    Правила:
    - Order створюється тільки через `Order.create` в DRAFT
    - Items змінюються поки order не SHIPPED/DELIVERED/CANCELLED
    - Один рядок на product: повторний add зливає кількість
    - CONFIRM потребує хоча б один item і адресу доставки
    - CANCEL можливий тільки з DRAFT або CONFIRMED
    - Інші aggregates (Customer, Product) - тільки за ID

    Example:
        >>> order = Order.create(OrderId.generate(), CustomerId("c-1"), "USD")
        >>> order.add_item(ProductId("p-1"), Money(Decimal("10"), "USD"), 2)
        >>> order.set_shipping_address(address)
        >>> order.confirm()
        >>> order.total  # Money(20, USD)
        >>> [e.kind for e in order.pending_events()]
        ['order.created', 'order.item_added', 'order.shipping_address_set', 'order.confirmed']
    """

    def __init__(
        self,
        id: OrderId,
        customer_id: CustomerId,
        currency: str,
        status: OrderStatus = OrderStatus.DRAFT,
        items: Optional[Iterable[OrderItem]] = None,
        shipping_address: Optional[ShippingAddress] = None,
        tracking_number: Optional[str] = None,
        cancellation_reason: Optional[str] = None,
        created_at: Optional[datetime] = None,
        version: int = 0,
    ) -> None:
        """Initialize order.

        Використовуйте `create` для нових orders та `reconstitute`
        для відновлення з persistence.
        """
        super().__init__(id)

        self._customer_id = customer_id
        # Money.zero validates and normalizes the currency code
        self._currency = Money.zero(currency).currency
        self._status = status
        self._items: list[OrderItem] = list(items or [])
        self._shipping_address = shipping_address
        self._tracking_number = tracking_number
        self._cancellation_reason = cancellation_reason
        self._created_at = created_at or datetime.now(timezone.utc)

        self.version = version
        self._events = PendingEvents()

    # ==================== Factories ====================

    @classmethod
    def create(
        cls,
        order_id: OrderId,
        customer_id: CustomerId,
        currency: str,
    ) -> "Order":
        """Factory method для нового order.

        Returns:
            Order в DRAFT з порожнім списком items та подією OrderCreated.
        """
        order = cls(
            id=order_id,
            customer_id=customer_id,
            currency=currency,
        )
        order._record(
            OrderCreated(
                aggregate_id=str(order_id),
                customer_id=str(customer_id),
                currency=order._currency,
            )
        )
        return order

    @classmethod
    def reconstitute(
        cls,
        id: OrderId,
        customer_id: CustomerId,
        currency: str,
        status: OrderStatus,
        items: Iterable[OrderItem],
        shipping_address: Optional[ShippingAddress],
        tracking_number: Optional[str],
        cancellation_reason: Optional[str],
        created_at: datetime,
        version: int,
    ) -> "Order":
        """Rebuild order from persistence (без events, без перевірки transitions)."""
        return cls(
            id=id,
            customer_id=customer_id,
            currency=currency,
            status=status,
            items=items,
            shipping_address=shipping_address,
            tracking_number=tracking_number,
            cancellation_reason=cancellation_reason,
            created_at=created_at,
            version=version,
        )

    # ==================== Commands ====================

    def add_item(
        self, product_id: ProductId, unit_price: Money, quantity: int
    ) -> None:
        """Add product line або злити кількість в існуючий рядок.

        Raises:
            InvalidOrderStateError: Якщо order SHIPPED/DELIVERED/CANCELLED.
            InvalidQuantityError: Якщо quantity <= 0.
        """
        self._ensure_items_editable("add item")
        added = Quantity(quantity)
        validate_value_object(
            isinstance(unit_price, Money), "Unit price must be Money"
        )

        line = self._find_item(product_id)
        if line is None:
            line = OrderItem(
                id=OrderItemId.generate(),
                product_id=product_id,
                unit_price=unit_price,
                quantity=added,
            )
            self._items.append(line)
        else:
            line.increase_quantity(added)

        self._record(
            OrderItemAdded(
                aggregate_id=str(self.id),
                product_id=str(product_id),
                quantity=added.value,
                line_quantity=line.quantity.value,
                unit_price=line.unit_price,
            )
        )

    def remove_item(self, product_id: ProductId) -> None:
        """Remove whole line for product.

        Raises:
            InvalidOrderStateError: Якщо order SHIPPED/DELIVERED/CANCELLED.
            OrderItemNotFoundError: Якщо рядка для product немає.
        """
        self._ensure_items_editable("remove item")

        line = self._find_item(product_id)
        if line is None:
            raise OrderItemNotFoundError(
                "Order item not found",
                order_id=str(self.id),
                product_id=str(product_id),
            )

        self._items.remove(line)
        self._record(
            OrderItemRemoved(
                aggregate_id=str(self.id),
                product_id=str(product_id),
                quantity=line.quantity.value,
            )
        )

    def set_shipping_address(self, address: ShippingAddress) -> None:
        """Set destination (тільки в DRAFT)."""
        self._ensure_status((OrderStatus.DRAFT,), "set shipping address")

        self._shipping_address = address
        self._record(ShippingAddressSet(aggregate_id=str(self.id), address=address))

    def confirm(self) -> None:
        """DRAFT → CONFIRMED.

        Total рахується до зміни стану: currency mismatch між рядками
        зупиняє confirm без жодної мутації.

        Raises:
            InvalidOrderStateError: Якщо order не DRAFT.
            EmptyOrderError: Якщо немає items.
            ShippingAddressRequiredError: Якщо адреса не задана.
            CurrencyMismatchError: Якщо рядки в різних валютах.
        """
        self._ensure_status((OrderStatus.DRAFT,), "confirm")

        if not self._items:
            raise EmptyOrderError(
                "Cannot confirm order without items", order_id=str(self.id)
            )
        if self._shipping_address is None:
            raise ShippingAddressRequiredError(
                "Cannot confirm order without shipping address",
                order_id=str(self.id),
            )

        total = self.total

        self._status = OrderStatus.CONFIRMED
        self._record(
            OrderConfirmed(
                aggregate_id=str(self.id),
                customer_id=str(self._customer_id),
                total=total,
                item_count=len(self._items),
            )
        )

    def ship(self, tracking_number: str) -> None:
        """CONFIRMED → SHIPPED.

        Raises:
            InvalidOrderStateError: Якщо order не CONFIRMED.
            ValidationError: Якщо tracking number порожній.
        """
        self._ensure_status((OrderStatus.CONFIRMED,), "ship")
        validate_value_object(
            isinstance(tracking_number, str) and bool(tracking_number.strip()),
            "Tracking number cannot be empty",
        )

        self._status = OrderStatus.SHIPPED
        self._tracking_number = tracking_number.strip()
        self._record(
            OrderShipped(
                aggregate_id=str(self.id), tracking_number=self._tracking_number
            )
        )

    def deliver(self) -> None:
        """SHIPPED → DELIVERED."""
        self._ensure_status((OrderStatus.SHIPPED,), "deliver")

        self._status = OrderStatus.DELIVERED
        self._record(OrderDelivered(aggregate_id=str(self.id)))

    def cancel(self, reason: str) -> None:
        """DRAFT/CONFIRMED → CANCELLED.

        Raises:
            InvalidOrderStateError: Якщо order SHIPPED, DELIVERED або вже CANCELLED.
        """
        self._ensure_status((OrderStatus.DRAFT, OrderStatus.CONFIRMED), "cancel")

        previous = self._status
        self._status = OrderStatus.CANCELLED
        self._cancellation_reason = reason
        self._record(
            OrderCancelled(
                aggregate_id=str(self.id),
                reason=reason,
                previous_status=previous.value,
            )
        )

    # ==================== Read-only surface ====================

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def shipping_address(self) -> Optional[ShippingAddress]:
        return self._shipping_address

    @property
    def tracking_number(self) -> Optional[str]:
        return self._tracking_number

    @property
    def cancellation_reason(self) -> Optional[str]:
        return self._cancellation_reason

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        """Immutable snapshots of order lines (в порядку додавання)."""
        return tuple(item.to_line() for item in self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def total(self) -> Money:
        """Sum of unit_price × quantity over all lines.

        Порожній order → Money.zero(currency).

        Raises:
            CurrencyMismatchError: Якщо рядки в різних валютах.
        """
        total = Money.zero(self._currency)
        for item in self._items:
            total = total.add(item.subtotal)
        return total

    @property
    def is_terminal(self) -> bool:
        return self._status.is_terminal

    def items(self) -> tuple[OrderItem, ...]:
        """Internal entities for persistence mappers.

        Повертає tuple, тому список items ззовні змінити не можна.
        """
        return tuple(self._items)

    # ==================== Events ====================

    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Get all pending domain events (non-destructive read)."""
        return self._events.snapshot()

    def clear_pending_events(self) -> None:
        """Clear buffer after aggregate and events were durably committed."""
        self._events.clear()

    # ==================== Internals ====================

    def _record(self, event: DomainEvent) -> None:
        self._events.record(event)

    def _find_item(self, product_id: ProductId) -> Optional[OrderItem]:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    def _ensure_status(
        self, allowed: tuple[OrderStatus, ...], operation: str
    ) -> None:
        if self._status not in allowed:
            raise InvalidOrderStateError(
                f"Cannot {operation}: invalid status",
                order_id=str(self.id),
                current_status=self._status.value,
                allowed_statuses=",".join(s.value for s in allowed),
            )

    def _ensure_items_editable(self, operation: str) -> None:
        if not self._status.accepts_item_changes:
            raise InvalidOrderStateError(
                f"Cannot {operation}: invalid status",
                order_id=str(self.id),
                current_status=self._status.value,
            )
