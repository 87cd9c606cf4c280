"""OrderSummary projection - read model побудований з Order events.

Read side оновлюється асинхронно (через outbox relay), тому він
eventually consistent з aggregate. Delivery at-least-once, тому projection
ідемпотентна: повторна подія з тим самим event_id ігнорується.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Optional
from uuid import UUID

from clean_ddd.domain.ordering import (
    ORDER_EVENT_TYPES,
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderEvent,
    OrderItemAdded,
    OrderItemRemoved,
    OrderShipped,
    OrderStatus,
    ShippingAddressSet,
)
from clean_ddd.application.shared import EventSubscriber
from clean_ddd.domain.shared import DomainEvent

logger = logging.getLogger(__name__)


@dataclass
class OrderSummary:
    """Denormalized order view для списків та dashboards."""

    order_id: str
    customer_id: str
    currency: str
    status: str = OrderStatus.DRAFT.value
    quantities: dict[str, int] = field(default_factory=dict)
    confirmed_total: Optional[Decimal] = None
    destination_city: Optional[str] = None
    tracking_number: Optional[str] = None
    cancellation_reason: Optional[str] = None

    @property
    def item_count(self) -> int:
        return len(self.quantities)

    @property
    def unit_count(self) -> int:
        return sum(self.quantities.values())


class OrderSummaryProjection:
    """Idempotent consumer всіх подій OrderEvent.

    Dispatch table покриває кожен варіант union OrderEvent; якщо додати
    новий тип події і забути handler, projection не створиться.

    Example:
        >>> projection = OrderSummaryProjection()
        >>> projection.subscribe_to(event_bus)
        >>> await relay.relay_pending()
        >>> projection.get("o-1").status
        'confirmed'
    """

    def __init__(self) -> None:
        self._summaries: dict[str, OrderSummary] = {}
        self._processed: set[UUID] = set()
        self._handlers: dict[type[DomainEvent], Callable[[OrderEvent], None]] = {
            OrderCreated: self._on_created,
            OrderItemAdded: self._on_item_added,
            OrderItemRemoved: self._on_item_removed,
            ShippingAddressSet: self._on_address_set,
            OrderConfirmed: self._on_confirmed,
            OrderShipped: self._on_shipped,
            OrderDelivered: self._on_delivered,
            OrderCancelled: self._on_cancelled,
        }
        missing = set(ORDER_EVENT_TYPES) - set(self._handlers)
        if missing:
            raise RuntimeError(
                "OrderSummaryProjection does not handle: "
                + ", ".join(sorted(t.__name__ for t in missing))
            )

    def subscribe_to(self, bus: EventSubscriber) -> None:
        """Subscribe `handle` to every order event type."""
        for event_type in ORDER_EVENT_TYPES:
            bus.subscribe(event_type, self.handle)

    async def handle(self, event: DomainEvent) -> None:
        if event.event_id in self._processed:
            logger.debug(
                "order_summary.duplicate_skipped",
                extra={"event_id": str(event.event_id), "kind": event.kind},
            )
            return

        apply = self._handlers.get(type(event))
        if apply is None:
            raise TypeError(f"Not an order event: {type(event).__name__}")

        apply(event)  # type: ignore[arg-type]
        self._processed.add(event.event_id)

    def get(self, order_id: str) -> Optional[OrderSummary]:
        return self._summaries.get(order_id)

    def all(self) -> list[OrderSummary]:
        return list(self._summaries.values())

    # ==================== Event appliers ====================

    def _on_created(self, event: OrderCreated) -> None:
        self._summaries[event.aggregate_id] = OrderSummary(
            order_id=event.aggregate_id,
            customer_id=event.customer_id,
            currency=event.currency,
        )

    def _on_item_added(self, event: OrderItemAdded) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.quantities[event.product_id] = event.line_quantity

    def _on_item_removed(self, event: OrderItemRemoved) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.quantities.pop(event.product_id, None)

    def _on_address_set(self, event: ShippingAddressSet) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.destination_city = event.address.city

    def _on_confirmed(self, event: OrderConfirmed) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.status = OrderStatus.CONFIRMED.value
            summary.confirmed_total = event.total.amount

    def _on_shipped(self, event: OrderShipped) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.status = OrderStatus.SHIPPED.value
            summary.tracking_number = event.tracking_number

    def _on_delivered(self, event: OrderDelivered) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.status = OrderStatus.DELIVERED.value

    def _on_cancelled(self, event: OrderCancelled) -> None:
        summary = self._require(event)
        if summary is not None:
            summary.status = OrderStatus.CANCELLED.value
            summary.cancellation_reason = event.reason

    def _require(self, event: DomainEvent) -> Optional[OrderSummary]:
        summary = self._summaries.get(event.aggregate_id)
        if summary is None:
            logger.warning(
                "order_summary.unknown_order",
                extra={"order_id": event.aggregate_id, "kind": event.kind},
            )
        return summary

