"""Outbox ORM Model - events записані в тій самій транзакції що й aggregate."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from clean_ddd.domain.shared import DomainEvent

from .base import Base


class OutboxMessageModel(Base):
    """Один рядок outbox.

    `position` (autoincrement) задає порядок commit, `event_id` унікальний,
    тому повторний запис тієї ж події неможливий.
    """

    __tablename__ = "outbox_messages"

    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    kind: Mapped[str] = mapped_column(String(100), nullable=False)
    aggregate_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(nullable=False)

    # Delivery state (оновлює relay)
    dispatched_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_error: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Query: undispatched messages в порядку commit
    __table_args__ = (Index("ix_outbox_pending", "dispatched_at", "position"),)

    @classmethod
    def from_event(cls, event: DomainEvent) -> "OutboxMessageModel":
        return cls(
            event_id=str(event.event_id),
            kind=event.kind,
            aggregate_id=event.aggregate_id,
            payload=event.to_payload(),
            occurred_at=event.occurred_at,
            attempts=0,
        )

    def __repr__(self) -> str:
        return (
            f"<OutboxMessageModel(position={self.position}, kind={self.kind}, "
            f"dispatched_at={self.dispatched_at}, attempts={self.attempts})>"
        )
