"""Tests для deserialize_event (outbox payload → domain event)."""

from decimal import Decimal

import pytest

from clean_ddd.domain.ordering import OrderConfirmed, ShippingAddress, ShippingAddressSet
from clean_ddd.domain.shared import Money
from clean_ddd.infrastructure.serialization import (
    EVENT_TYPES_BY_KIND,
    KNOWN_EVENT_TYPES,
    UnknownEventKind,
    deserialize_event,
)


def test_value_objects_rebuilt():
    event = OrderConfirmed(
        aggregate_id="o-1",
        customer_id="c-1",
        total=Money(Decimal("45.00"), "USD"),
        item_count=2,
    )

    rebuilt = deserialize_event(event.kind, event.to_payload())

    assert rebuilt == event
    assert isinstance(rebuilt.total, Money)
    assert rebuilt.total.amount == Decimal("45.00")


def test_nested_address_rebuilt(address):
    event = ShippingAddressSet(aggregate_id="o-1", address=address)

    rebuilt = deserialize_event(event.kind, event.to_payload())

    assert isinstance(rebuilt.address, ShippingAddress)
    assert rebuilt.address.country == "UA"
    assert rebuilt.event_id == event.event_id
    assert rebuilt.occurred_at == event.occurred_at


def test_unknown_kind_rejected():
    with pytest.raises(UnknownEventKind):
        deserialize_event("stray.event", {"aggregate_id": "x"})


def test_kinds_are_unique():
    assert len(EVENT_TYPES_BY_KIND) == len(KNOWN_EVENT_TYPES)
    assert "user.deleted" in EVENT_TYPES_BY_KIND
