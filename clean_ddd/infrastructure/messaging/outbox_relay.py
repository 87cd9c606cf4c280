"""Outbox relay - публікує закомічені events з outbox таблиці.

Delivery at-least-once: message позначається dispatched тільки після
успішного publish. Якщо publish впав (EventDispatchError або будь-що інше),
attempts збільшується і message лишається в черзі. Якщо процес впаде між
publish і mark, подія прийде повторно, тому consumers dedupe за event_id.
"""

import logging
from dataclasses import dataclass

from clean_ddd.application.shared import EventPublisher
from clean_ddd.infrastructure.persistence.sqlalchemy import SQLAlchemyOutbox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayResult:
    dispatched: int
    failed: int
    remaining: int


class OutboxRelay:
    """Relay outbox messages до EventPublisher в порядку commit.

    Example:
        >>> relay = OutboxRelay(outbox, event_bus, batch_size=100)
        >>> result = await relay.relay_pending()
        >>> result.dispatched
        3
    """

    def __init__(
        self,
        outbox: SQLAlchemyOutbox,
        publisher: EventPublisher,
        batch_size: int = 100,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self._outbox = outbox
        self._publisher = publisher
        self._batch_size = batch_size

    async def relay_pending(self, batch_size: int | None = None) -> RelayResult:
        """Publish one batch of undispatched messages.

        Перша помилка publish зупиняє batch, щоб наступні події того ж
        aggregate не обігнали ту що впала.
        """
        limit = batch_size or self._batch_size
        batch = await self._outbox.pending(limit)
        dispatched = 0
        failed = 0

        for message in batch:
            try:
                await self._publisher.publish(message.event)
            except Exception as e:
                attempts = await self._outbox.mark_failed(message.event_id, str(e))
                failed = 1
                logger.error(
                    "outbox.publish_failed",
                    extra={
                        "event_id": str(message.event_id),
                        "kind": message.kind,
                        "attempts": attempts,
                        "error": str(e),
                    },
                    exc_info=True,
                )
                break

            await self._outbox.mark_dispatched(message.event_id)
            dispatched += 1

        remaining = await self._outbox.count_pending()
        if batch:
            logger.info(
                "outbox.relayed",
                extra={
                    "dispatched": dispatched,
                    "failed": failed,
                    "remaining": remaining,
                },
            )
        return RelayResult(dispatched=dispatched, failed=failed, remaining=remaining)

    async def drain(self, max_batches: int = 100) -> int:
        """Relay batches until outbox empty або publish failure.

        Returns:
            Total dispatched messages.
        """
        total = 0
        for _ in range(max_batches):
            result = await self.relay_pending()
            total += result.dispatched
            if result.failed or result.remaining == 0:
                break
        return total
