"""IdempotentConsumer - dedupe за event_id для at-least-once delivery."""

import logging
from typing import Iterable, Optional
from uuid import UUID

from clean_ddd.application.shared import EventHandler
from clean_ddd.domain.shared import DomainEvent

logger = logging.getLogger(__name__)


class IdempotentConsumer:
    """Wrap handler so each event_id is processed at most once.

    Event id позначається processed тільки після успішного handler;
    якщо handler впав, повторна доставка виконає його знову.

    Example:
        >>> consumer = IdempotentConsumer(remove_tasks.handle, name="remove_user_tasks")
        >>> event_bus.subscribe(UserDeleted, consumer)
    """

    def __init__(
        self,
        handler: EventHandler,
        name: Optional[str] = None,
        processed: Optional[Iterable[UUID]] = None,
    ) -> None:
        self._handler = handler
        self.name = name or getattr(handler, "__qualname__", "consumer")
        self._processed: set[UUID] = set(processed or ())

    async def __call__(self, event: DomainEvent) -> None:
        if event.event_id in self._processed:
            logger.debug(
                "consumer.duplicate_skipped",
                extra={"consumer": self.name, "event_id": str(event.event_id)},
            )
            return

        await self._handler(event)
        self._processed.add(event.event_id)

    def has_processed(self, event_id: UUID) -> bool:
        return event_id in self._processed
