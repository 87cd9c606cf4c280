"""Tests для EventBus та IdempotentConsumer."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from clean_ddd.domain.ordering import OrderCreated, OrderDelivered
from clean_ddd.domain.shared import DomainEvent
from clean_ddd.infrastructure.messaging import (
    EventBus,
    EventDispatchError,
    IdempotentConsumer,
)


@dataclass(frozen=True)
class StrayEvent(DomainEvent):
    kind: ClassVar[str] = "stray.event"


def _created(order_id: str = "o-1") -> OrderCreated:
    return OrderCreated(aggregate_id=order_id, customer_id="c-1", currency="USD")


class TestEventBus:
    @pytest.mark.asyncio
    async def test_publish_calls_all_subscribers(self):
        bus = EventBus()
        received: list[str] = []

        async def first(event):
            received.append("first")

        async def second(event):
            received.append("second")

        bus.subscribe(OrderCreated, first)
        bus.subscribe(OrderCreated, second)

        await bus.publish(_created())

        assert received == ["first", "second"]

    @pytest.mark.asyncio
    async def test_only_matching_type_is_delivered(self):
        bus = EventBus()
        received: list[DomainEvent] = []

        async def handler(event):
            received.append(event)

        bus.subscribe(OrderDelivered, handler)
        await bus.publish(_created())

        assert received == []

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        received: list[DomainEvent] = []

        async def broken(event):
            raise RuntimeError("handler down")

        async def healthy(event):
            received.append(event)

        bus.subscribe(OrderCreated, broken)
        bus.subscribe(OrderCreated, healthy)

        event = _created()
        with pytest.raises(EventDispatchError) as exc_info:
            await bus.publish(event)

        # healthy handler виконався до того як publish підняв помилку
        assert len(received) == 1
        assert exc_info.value.event is event
        ((name, error),) = exc_info.value.failures
        assert name.endswith("broken")
        assert isinstance(error, RuntimeError)

    def test_subscribe_to_unknown_event_type_rejected(self):
        bus = EventBus()

        async def handler(event):
            pass

        with pytest.raises(TypeError):
            bus.subscribe(StrayEvent, handler)

    @pytest.mark.asyncio
    async def test_publish_all_preserves_order(self):
        bus = EventBus()
        seen: list[str] = []

        async def handler(event):
            seen.append(event.aggregate_id)

        bus.subscribe(OrderCreated, handler)
        await bus.publish_all([_created("o-1"), _created("o-2"), _created("o-3")])

        assert seen == ["o-1", "o-2", "o-3"]

    def test_unsubscribe(self):
        bus = EventBus()

        async def handler(event):
            pass

        bus.subscribe(OrderCreated, handler)
        bus.unsubscribe(OrderCreated, handler)

        assert bus.subscribers_count(OrderCreated) == 0


class TestIdempotentConsumer:
    @pytest.mark.asyncio
    async def test_duplicate_event_processed_once(self):
        calls: list[DomainEvent] = []

        async def handler(event):
            calls.append(event)

        consumer = IdempotentConsumer(handler, name="counter")
        event = _created()

        await consumer(event)
        await consumer(event)

        assert len(calls) == 1
        assert consumer.has_processed(event.event_id)

    @pytest.mark.asyncio
    async def test_failed_handling_is_retried(self):
        attempts: list[int] = []

        async def flaky(event):
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("temporary")

        consumer = IdempotentConsumer(flaky)
        event = _created()

        with pytest.raises(RuntimeError):
            await consumer(event)
        await consumer(event)

        assert len(attempts) == 2
        assert consumer.has_processed(event.event_id)
