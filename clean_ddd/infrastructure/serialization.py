"""Domain events ↔ JSON payload.

Outbox зберігає `event.to_payload()`; relay відновлює з нього ту саму
подію (той самий event_id, щоб consumers могли dedupe).
"""

from dataclasses import fields, is_dataclass
from datetime import datetime
from typing import Any, Type, get_type_hints
from uuid import UUID

from clean_ddd.domain.ordering import ORDER_EVENT_TYPES
from clean_ddd.domain.shared import DomainEvent
from clean_ddd.domain.tasks import TASK_EVENT_TYPES
from clean_ddd.domain.users import USER_EVENT_TYPES

KNOWN_EVENT_TYPES: tuple[Type[DomainEvent], ...] = (
    ORDER_EVENT_TYPES + USER_EVENT_TYPES + TASK_EVENT_TYPES
)

EVENT_TYPES_BY_KIND: dict[str, Type[DomainEvent]] = {
    event_type.kind: event_type for event_type in KNOWN_EVENT_TYPES
}


class UnknownEventKind(ValueError):
    """Payload має kind якого нема в жодному closed union."""


def deserialize_event(kind: str, payload: dict[str, Any]) -> DomainEvent:
    """Rebuild domain event з outbox payload.

    Value objects (Money, ShippingAddress) відновлюються з dict через
    їхній конструктор, тому проходять ту ж валідацію.

    Raises:
        UnknownEventKind: kind не зареєстрований.
    """
    try:
        event_type = EVENT_TYPES_BY_KIND[kind]
    except KeyError:
        raise UnknownEventKind(f"Unknown event kind: {kind}") from None

    hints = get_type_hints(event_type)
    kwargs = {
        f.name: _from_primitive(hints[f.name], payload[f.name])
        for f in fields(event_type)
        if f.init
    }
    event = event_type(**kwargs)
    # event_id та occurred_at - init=False, відновлюємо з payload
    object.__setattr__(event, "event_id", UUID(payload["event_id"]))
    object.__setattr__(
        event, "occurred_at", datetime.fromisoformat(payload["occurred_at"])
    )
    return event


def _from_primitive(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    if isinstance(hint, type) and is_dataclass(hint):
        return hint(**value)
    return value
