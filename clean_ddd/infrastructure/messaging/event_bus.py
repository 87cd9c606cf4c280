"""Event Bus - in-process доставка domain events.

Event Bus enables event-driven architecture:
- Aggregates записують events (OrderConfirmed, UserDeleted, etc.)
- Outbox relay публікує їх після commit
- Projections та consumers підписуються на конкретні event classes
- Decoupling: domain не знає про subscribers
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional, Type

from clean_ddd.application.shared import EventHandler, EventPublisher, EventSubscriber
from clean_ddd.domain.shared import DomainEvent
from clean_ddd.infrastructure.serialization import KNOWN_EVENT_TYPES

logger = logging.getLogger(__name__)


class EventDispatchError(Exception):
    """Один або більше handlers впали під час publish.

    Решта handlers вже виконані; caller (relay) не позначає подію
    dispatched, тому вона буде доставлена повторно.
    """

    def __init__(
        self, event: DomainEvent, failures: list[tuple[str, Exception]]
    ) -> None:
        names = ", ".join(f"{name}: {error}" for name, error in failures)
        super().__init__(
            f"{len(failures)} handler(s) failed for {event.event_name}: {names}"
        )
        self.event = event
        self.failures = failures


class EventBus(EventPublisher, EventSubscriber):
    """Event Bus для domain events.

    Підписатись можна тільки на членів closed unions (OrderEvent,
    UserEvent, TaskEvent); будь-що інше - TypeError при subscribe.

    Example:
        >>> event_bus = EventBus()
        >>> event_bus.subscribe(OrderConfirmed, send_confirmation_email)
        >>> event_bus.subscribe(OrderConfirmed, projection.handle)

        >>> # Publish (зазвичай це робить OutboxRelay після commit)
        >>> await event_bus.publish(event)
        >>> # OrderConfirmed → send_confirmation_email + projection.handle
    """

    def __init__(
        self, event_types: Optional[Iterable[Type[DomainEvent]]] = None
    ) -> None:
        self._known_types = frozenset(
            KNOWN_EVENT_TYPES if event_types is None else event_types
        )
        # Map: event_type → list of handlers
        self._subscribers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)
        logger.debug(
            "event_bus.initialized",
            extra={"known_types": len(self._known_types)},
        )

    def subscribe(
        self, event_type: Type[DomainEvent], handler: EventHandler
    ) -> None:
        """Subscribe handler to event type.

        Raises:
            TypeError: Event type не належить жодному closed union.
        """
        if event_type not in self._known_types:
            raise TypeError(
                f"Cannot subscribe to unregistered event type {event_type!r}"
            )

        self._subscribers[event_type].append(handler)
        logger.debug(
            "event_bus.subscription_added",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    def unsubscribe(
        self, event_type: Type[DomainEvent], handler: EventHandler
    ) -> None:
        if handler in self._subscribers[event_type]:
            self._subscribers[event_type].remove(handler)
            logger.debug(
                "event_bus.subscription_removed",
                extra={
                    "event_type": event_type.__name__,
                    "handler": _handler_name(handler),
                },
            )

    async def publish(self, event: DomainEvent) -> None:
        """Publish single domain event.

        Викликає всі handlers для цього event type. Помилка одного handler
        логується і не зупиняє інших, але після всіх handlers publish
        піднімає EventDispatchError.

        Raises:
            EventDispatchError: Хоча б один handler впав.
        """
        event_type = type(event)
        handlers = list(self._subscribers.get(event_type, []))

        if not handlers:
            logger.debug(
                "event_bus.no_subscribers",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.info(
            "event_bus.publishing",
            extra={
                "event_type": event_type.__name__,
                "handlers_count": len(handlers),
                "event_id": str(event.event_id),
            },
        )

        failures: list[tuple[str, Exception]] = []
        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                failures.append((_handler_name(handler), e))
                logger.error(
                    "event_bus.handler_failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": _handler_name(handler),
                        "event_id": str(event.event_id),
                        "error": str(e),
                    },
                    exc_info=True,
                )

        if failures:
            raise EventDispatchError(event, failures)

    def subscribers_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._subscribers.get(event_type, []))


def _handler_name(handler: EventHandler) -> str:
    name = getattr(handler, "name", None) or getattr(handler, "__qualname__", None)
    return name or type(handler).__name__
