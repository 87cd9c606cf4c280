"""Base DomainEvent class for event-driven architecture.

DomainEvent - щось важливе що сталось в domain, про що треба повідомити інші частини системи.
Events дозволяють decoupling: domain logic не знає хто і як обробляє events.
"""

from abc import ABC
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    DomainEvent репрезентує факт що щось сталося в domain.
    Events іменуються в минулому часі (OrderConfirmed, TaskCompleted).

    Характеристики:
    - **Immutable**: Events не змінюються після створення
    - **Discriminated**: `kind` - стабільний тег типу події ("order.confirmed")
    - **Snapshot payload**: тільки ID та primitives/value objects, ніколи
      live references на mutable entities
    - **Timestamped**: Коли подія сталась
    - **Unique**: Кожна подія має унікальний ID (для idempotent consumers)

    Example:
        >>> @dataclass(frozen=True)
        ... class OrderShipped(DomainEvent):
        ...     kind: ClassVar[str] = "order.shipped"
        ...     tracking_number: str

        >>> event = OrderShipped(aggregate_id="o-1", tracking_number="TRK-1")
        >>> event.to_payload()["tracking_number"]
        'TRK-1'
    """

    kind: ClassVar[str] = "domain.event"

    aggregate_id: str
    """ID aggregate який згенерував подію."""

    event_id: UUID = field(default_factory=uuid4, init=False)
    """Унікальний ID події (auto-generated)."""

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    """Час коли подія сталась (auto-generated, UTC)."""

    @property
    def event_name(self) -> str:
        """Get human-readable event name.

        Returns:
            Event class name (e.g., "OrderConfirmed").
        """
        return self.__class__.__name__

    def to_payload(self) -> dict[str, Any]:
        """Serialize event attributes to JSON-friendly primitives.

        Використовується outbox для збереження та логування.
        """
        return {f.name: _to_primitive(getattr(self, f.name)) for f in fields(self)}

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            String like "OrderConfirmed(event_id=..., aggregate_id=...)".
        """
        return (
            f"{self.event_name}(event_id={self.event_id}, "
            f"aggregate_id={self.aggregate_id}, occurred_at={self.occurred_at})"
        )


def _to_primitive(value: Any) -> Any:
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_primitive(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_primitive(v) for v in value]
    return value
