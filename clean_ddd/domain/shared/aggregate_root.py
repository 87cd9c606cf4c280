"""Aggregate root capabilities.

AggregateRoot - головний Entity в Aggregate, який контролює доступ до всіх
інших entities всередині aggregate та забезпечує consistency.

Замість глибокої ієрархії (Entity -> AggregateRoot -> Order) aggregate
складається з двох capabilities:
- `Entity` - identity та equality за ID
- `PendingEvents` - власний буфер domain events (composition, не inheritance)

`AggregateRoot` - це Protocol: контракт який очікують repositories та
handlers, без спільного базового класу.
"""

from typing import Iterator, Protocol, runtime_checkable

from .domain_event import DomainEvent
from .identifiers import Identifier


class PendingEvents:
    """Buffer of domain events not yet handed to persistence.

    Правила:
    - Належить рівно одному aggregate instance (не shared, не aliased)
    - `snapshot()` не очищає буфер (read is non-destructive)
    - `clear()` викликається тільки після успішного commit (aggregate + outbox)
    - Якщо commit failed, буфер не чіпаємо: retry відправить ті ж events
      (at-least-once, consumers мають бути idempotent)

    Example:
        >>> events = PendingEvents()
        >>> events.record(OrderCreated(...))
        >>> events.snapshot()  # (OrderCreated(...),)
        >>> events.clear()
        >>> len(events)  # 0
    """

    __slots__ = ("_events",)

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    def record(self, event: DomainEvent) -> None:
        """Append event to the buffer."""
        self._events.append(event)

    def snapshot(self) -> tuple[DomainEvent, ...]:
        """Return current events without clearing them."""
        return tuple(self._events)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __iter__(self) -> Iterator[DomainEvent]:
        return iter(tuple(self._events))

    def __deepcopy__(self, memo: dict) -> "PendingEvents":
        # Copies of an aggregate never share or inherit its pending events.
        return PendingEvents()


@runtime_checkable
class AggregateRoot(Protocol):
    """Contract every aggregate root satisfies.

    Aggregate - це:
    - **Consistency boundary**: всі invariants перевіряються методами root
    - **Transaction boundary**: один aggregate = одна транзакція
    - **Event producer**: кожна успішна мутація додає рівно одну подію

    `version` - лічильник optimistic concurrency: 0 для нових aggregates,
    збільшується repository при кожному успішному save.
    """

    version: int

    @property
    def id(self) -> Identifier:
        ...

    def pending_events(self) -> tuple[DomainEvent, ...]:
        ...

    def clear_pending_events(self) -> None:
        ...
