"""Event ports - куди application layer віддає domain events.

Реалізація в infrastructure (EventBus). Publisher викликається outbox relay
після того як aggregate та його events закомічені; subscriber API
використовують projections та cross-aggregate consumers.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Iterable

from clean_ddd.domain.shared import DomainEvent

# Event handler signature: async function that takes DomainEvent
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventPublisher(ABC):
    """Abstract event publisher.

    Delivery - at-least-once: одна подія може прийти повторно,
    тому consumers мають бути idempotent (dedupe за event_id).
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        pass

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events in order."""
        for event in events:
            await self.publish(event)


class EventSubscriber(ABC):
    """Abstract subscription API."""

    @abstractmethod
    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        pass
