"""Messaging infrastructure - event bus, idempotent consumers, outbox relay."""

from clean_ddd.infrastructure.serialization import KNOWN_EVENT_TYPES

from .event_bus import EventBus, EventDispatchError
from .idempotent_consumer import IdempotentConsumer
from .outbox_relay import OutboxRelay, RelayResult

__all__ = [
    "EventBus",
    "EventDispatchError",
    "KNOWN_EVENT_TYPES",
    "IdempotentConsumer",
    "OutboxRelay",
    "RelayResult",
]
