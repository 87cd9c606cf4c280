"""Outbox store - читання та delivery state outbox таблиці.

Рядки outbox додають repositories в тій самій session що й aggregate
(див. `SQLAlchemyRepository._stage_events`). Тут тільки relay-side операції.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, func, select, update

from clean_ddd.domain.shared import DomainEvent
from clean_ddd.infrastructure.persistence.sqlalchemy.database import Database
from clean_ddd.infrastructure.persistence.sqlalchemy.models import OutboxMessageModel
from clean_ddd.infrastructure.serialization import deserialize_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboxMessage:
    """Snapshot одного outbox рядка."""

    position: int
    event_id: UUID
    kind: str
    aggregate_id: str
    payload: dict[str, Any]
    occurred_at: datetime
    dispatched_at: Optional[datetime] = None
    attempts: int = 0
    last_error: Optional[str] = None

    @classmethod
    def from_model(cls, model: OutboxMessageModel) -> "OutboxMessage":
        return cls(
            position=model.position,
            event_id=UUID(model.event_id),
            kind=model.kind,
            aggregate_id=model.aggregate_id,
            payload=dict(model.payload),
            occurred_at=model.occurred_at,
            dispatched_at=model.dispatched_at,
            attempts=model.attempts,
            last_error=model.last_error,
        )

    @property
    def is_dispatched(self) -> bool:
        return self.dispatched_at is not None

    @property
    def event(self) -> DomainEvent:
        """Domain event відновлений з payload (той самий event_id)."""
        return deserialize_event(self.kind, self.payload)


class SQLAlchemyOutbox:
    """Relay-side доступ до outbox_messages.

    Example:
        >>> outbox = SQLAlchemyOutbox(database)
        >>> for message in await outbox.pending(limit=100):
        ...     await publisher.publish(message.event)
        ...     await outbox.mark_dispatched(message.event_id)
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def pending(self, limit: int) -> list[OutboxMessage]:
        """Oldest-first undispatched messages (index ix_outbox_pending)."""
        stmt = (
            select(OutboxMessageModel)
            .where(OutboxMessageModel.dispatched_at.is_(None))
            .order_by(OutboxMessageModel.position)
            .limit(limit)
        )
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [OutboxMessage.from_model(m) for m in result.scalars().all()]

    async def count_pending(self) -> int:
        stmt = select(func.count()).where(OutboxMessageModel.dispatched_at.is_(None))
        async with self._database.session() as session:
            return await session.scalar(stmt) or 0

    async def messages(self) -> list[OutboxMessage]:
        """All messages в порядку commit (dispatched теж)."""
        stmt = select(OutboxMessageModel).order_by(OutboxMessageModel.position)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [OutboxMessage.from_model(m) for m in result.scalars().all()]

    async def mark_dispatched(self, event_id: UUID) -> None:
        await self._execute(
            update(OutboxMessageModel)
            .where(OutboxMessageModel.event_id == str(event_id))
            .values(dispatched_at=datetime.now(timezone.utc), last_error=None)
        )

    async def mark_failed(self, event_id: UUID, error: str) -> int:
        """Increment attempts; message лишається undispatched.

        Returns:
            Attempts після інкременту.
        """
        await self._execute(
            update(OutboxMessageModel)
            .where(OutboxMessageModel.event_id == str(event_id))
            .values(
                attempts=OutboxMessageModel.attempts + 1,
                last_error=error,
            )
        )
        stmt = select(OutboxMessageModel.attempts).where(
            OutboxMessageModel.event_id == str(event_id)
        )
        async with self._database.session() as session:
            return await session.scalar(stmt) or 0

    async def prune_dispatched(self, before: datetime) -> int:
        """Delete messages dispatched раніше за `before`.

        Returns:
            Кількість видалених рядків.
        """
        rowcount = await self._execute(
            delete(OutboxMessageModel).where(
                OutboxMessageModel.dispatched_at.is_not(None),
                OutboxMessageModel.dispatched_at < before,
            )
        )
        logger.info("outbox.pruned", extra={"deleted": rowcount})
        return rowcount

    async def _execute(self, stmt: Any) -> int:
        async with self._database.session() as session:
            async with self._database.transaction_guard():
                result = await session.execute(stmt)
                rowcount = result.rowcount
                await session.commit()
            return rowcount
