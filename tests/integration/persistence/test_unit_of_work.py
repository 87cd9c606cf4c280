"""Integration tests для SQLAlchemyUnitOfWork та repositories."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import select

from clean_ddd.domain.ordering import CustomerId, Order, OrderId, OrderStatus, ProductId
from clean_ddd.domain.shared import (
    AggregateAlreadyExists,
    ConcurrencyException,
    Money,
    UserId,
)
from clean_ddd.domain.users import User
from clean_ddd.infrastructure.persistence.sqlalchemy import SQLAlchemyUnitOfWork
from clean_ddd.infrastructure.persistence.sqlalchemy.models import OrderItemModel


async def _persist_new_order(
    uow: SQLAlchemyUnitOfWork, order_id: str = "o-1"
) -> Order:
    async with uow:
        order = Order.create(OrderId(order_id), CustomerId("c-1"), "USD")
        order.add_item(ProductId("p-1"), Money(Decimal("10"), "USD"), 2)
        await uow.orders.save(order)
        await uow.commit()
        order.clear_pending_events()
    return order


async def _load_order(uow: SQLAlchemyUnitOfWork, order_id: str = "o-1"):
    async with uow:
        return await uow.orders.get_by_id(OrderId(order_id))


class TestUnitOfWork:
    """Integration tests для Unit of Work pattern."""

    @pytest.mark.asyncio
    async def test_commit_transaction(self, uow):
        order = await _persist_new_order(uow)

        loaded = await _load_order(uow)

        assert loaded is not None
        assert loaded == order
        assert loaded.version == 1
        assert loaded.lines == order.lines
        assert loaded.total == Money(Decimal("20"), "USD")
        assert loaded.created_at == order.created_at
        assert loaded.pending_events() == ()

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, uow):
        async with uow:
            assert await uow.orders.get_by_id(OrderId("nope")) is None

    @pytest.mark.asyncio
    async def test_rollback_on_exception(self, uow):
        order = Order.create(OrderId("o-1"), CustomerId("c-1"), "USD")

        with pytest.raises(ValueError):
            async with uow:
                await uow.orders.save(order)
                raise ValueError("Test exception")

        assert await _load_order(uow) is None
        # buffer та version лишаються як до save - retry можливий
        assert order.version == 0
        assert len(order.pending_events()) == 1

    @pytest.mark.asyncio
    async def test_uncommitted_changes_are_discarded(self, uow, outbox):
        async with uow:
            await uow.orders.save(Order.create(OrderId("o-1"), CustomerId("c"), "USD"))

        assert await _load_order(uow) is None
        assert await outbox.messages() == []

    @pytest.mark.asyncio
    async def test_staged_writes_invisible_to_other_units(self, database):
        writer = SQLAlchemyUnitOfWork(database)
        reader = SQLAlchemyUnitOfWork(database)

        async with writer:
            await writer.orders.save(Order.create(OrderId("o-1"), CustomerId("c"), "USD"))

            async with reader:
                assert await reader.orders.get_by_id(OrderId("o-1")) is None

            await writer.commit()

        async with reader:
            assert await reader.orders.get_by_id(OrderId("o-1")) is not None

    @pytest.mark.asyncio
    async def test_nested_enter_rejected(self, uow):
        async with uow:
            with pytest.raises(RuntimeError):
                async with uow:
                    pass

    @pytest.mark.asyncio
    async def test_repository_requires_started_unit(self, uow):
        with pytest.raises(RuntimeError):
            uow.orders


class TestOrderItemRows:
    @pytest.mark.asyncio
    async def test_item_rows_synced_on_update(self, uow, database):
        await _persist_new_order(uow)

        async with uow:
            order = await uow.orders.get_by_id(OrderId("o-1"))
            order.add_item(ProductId("p-2"), Money(Decimal("0.10"), "USD"), 3)
            order.remove_item(ProductId("p-1"))
            await uow.orders.save(order)
            await uow.commit()

        loaded = await _load_order(uow)
        assert [line.product_id for line in loaded.lines] == [ProductId("p-2")]
        # Decimal зберігається точно (текстом)
        assert loaded.total == Money(Decimal("0.30"), "USD")

        # delete-orphan прибрав рядок p-1
        async with database.session() as session:
            rows = (await session.execute(select(OrderItemModel))).scalars().all()
        assert [row.product_id for row in rows] == ["p-2"]


class TestTransactionalOutbox:
    @pytest.mark.asyncio
    async def test_events_written_with_state(self, uow, outbox):
        order = Order.create(OrderId("o-1"), CustomerId("c-1"), "USD")
        order.add_item(ProductId("p-1"), Money(Decimal("10"), "USD"), 1)
        event_ids = [event.event_id for event in order.pending_events()]

        async with uow:
            await uow.orders.save(order)
            await uow.commit()

        messages = await outbox.messages()
        assert [message.event_id for message in messages] == event_ids
        assert messages[0].kind == "order.created"
        assert messages[1].payload["unit_price"] == {
            "amount": "10",
            "currency": "USD",
        }
        assert all(not message.is_dispatched for message in messages)

    @pytest.mark.asyncio
    async def test_message_rebuilds_same_event(self, uow, outbox):
        order = Order.create(OrderId("o-1"), CustomerId("c-1"), "USD")
        order.add_item(ProductId("p-1"), Money(Decimal("10"), "USD"), 1)
        original = order.pending_events()

        async with uow:
            await uow.orders.save(order)
            await uow.commit()

        rebuilt = [message.event for message in await outbox.messages()]
        assert rebuilt == list(original)

    @pytest.mark.asyncio
    async def test_resave_does_not_duplicate_outbox_messages(self, uow, outbox):
        order = Order.create(OrderId("o-1"), CustomerId("c-1"), "USD")

        async with uow:
            await uow.orders.save(order)
            await uow.orders.save(order)
            await uow.commit()

        assert len(await outbox.messages()) == 1
        assert (await _load_order(uow)).version == 2

    @pytest.mark.asyncio
    async def test_rolled_back_events_not_in_outbox(self, uow, outbox):
        with pytest.raises(RuntimeError):
            async with uow:
                await uow.orders.save(Order.create(OrderId("o-1"), CustomerId("c"), "USD"))
                raise RuntimeError("boom")

        assert await outbox.messages() == []

    @pytest.mark.asyncio
    async def test_pending_and_mark_dispatched(self, uow, outbox):
        order = Order.create(OrderId("o-1"), CustomerId("c-1"), "USD")
        order.add_item(ProductId("p-1"), Money(Decimal("10"), "USD"), 1)
        async with uow:
            await uow.orders.save(order)
            await uow.commit()

        first, second = await outbox.pending(limit=10)
        await outbox.mark_dispatched(first.event_id)

        assert [m.event_id for m in await outbox.pending(limit=10)] == [second.event_id]
        assert await outbox.count_pending() == 1

    @pytest.mark.asyncio
    async def test_prune_dispatched(self, uow, outbox):
        await _persist_new_order(uow)
        messages = await outbox.messages()
        await outbox.mark_dispatched(messages[0].event_id)

        deleted = await outbox.prune_dispatched(
            datetime.now(timezone.utc) + timedelta(seconds=1)
        )

        assert deleted == 1
        assert [m.event_id for m in await outbox.messages()] == [messages[1].event_id]


class TestOptimisticConcurrency:
    @pytest.mark.asyncio
    async def test_stale_save_rejected(self, database):
        await _persist_new_order(SQLAlchemyUnitOfWork(database))
        first = SQLAlchemyUnitOfWork(database)
        second = SQLAlchemyUnitOfWork(database)

        async with first:
            order_a = await first.orders.get_by_id(OrderId("o-1"))
            async with second:
                order_b = await second.orders.get_by_id(OrderId("o-1"))

                order_a.cancel("customer request")
                await first.orders.save(order_a)
                await first.commit()

                order_b.add_item(ProductId("p-2"), Money(Decimal("1"), "USD"), 1)
                with pytest.raises(ConcurrencyException):
                    await second.orders.save(order_b)

        stored = await _load_order(first)
        assert stored.status == OrderStatus.CANCELLED
        assert stored.item_count == 1
        assert stored.version == 2

    @pytest.mark.asyncio
    async def test_conflict_detected_at_commit(self, database, outbox):
        await _persist_new_order(SQLAlchemyUnitOfWork(database))
        first = SQLAlchemyUnitOfWork(database)
        second = SQLAlchemyUnitOfWork(database)

        async with first:
            async with second:
                order_a = await first.orders.get_by_id(OrderId("o-1"))
                order_b = await second.orders.get_by_id(OrderId("o-1"))
                order_a.cancel("a")
                order_b.cancel("b")
                await first.orders.save(order_a)
                await second.orders.save(order_b)

                await first.commit()
                # UPDATE ... WHERE version = 1 не знаходить рядок
                with pytest.raises(ConcurrencyException):
                    await second.commit()

        # loser's buffer не очищено, version відновлено
        assert len(order_b.pending_events()) == 1
        assert order_b.version == 1
        stored = await _load_order(first)
        assert stored.cancellation_reason == "a"
        kinds = [m.kind for m in await outbox.messages()]
        assert kinds.count("order.cancelled") == 1

    @pytest.mark.asyncio
    async def test_new_aggregate_with_existing_id_rejected(self, database):
        await _persist_new_order(SQLAlchemyUnitOfWork(database))
        uow = SQLAlchemyUnitOfWork(database)

        async with uow:
            with pytest.raises(ConcurrencyException):
                await uow.orders.save(Order.create(OrderId("o-1"), CustomerId("c"), "USD"))


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_email_must_be_unique(self, uow):
        async with uow:
            await uow.users.save(User.register(UserId("u-1"), "Alice", "a@example.com"))
            await uow.commit()

        async with uow:
            with pytest.raises(AggregateAlreadyExists):
                await uow.users.save(
                    User.register(UserId("u-2"), "Alice 2", "A@example.com")
                )

    @pytest.mark.asyncio
    async def test_unique_index_catches_concurrent_registration(self, database, outbox):
        first = SQLAlchemyUnitOfWork(database)
        second = SQLAlchemyUnitOfWork(database)
        loser = User.register(UserId("u-2"), "Alice 2", "A@example.com")

        async with first:
            async with second:
                # обидва save проходять: жоден ще не закомічений
                await first.users.save(
                    User.register(UserId("u-1"), "Alice", "a@example.com")
                )
                await second.users.save(loser)

                await first.commit()
                with pytest.raises(AggregateAlreadyExists):
                    await second.commit()

        assert loser.version == 0
        assert [m.kind for m in await outbox.messages()] == ["user.registered"]

    @pytest.mark.asyncio
    async def test_remove_writes_deleted_event(self, uow, outbox):
        async with uow:
            user = User.register(UserId("u-1"), "Alice", "a@example.com")
            await uow.users.save(user)
            await uow.commit()
            user.clear_pending_events()

        async with uow:
            user = await uow.users.get_by_id(UserId("u-1"))
            user.delete()
            await uow.users.remove(user)
            await uow.commit()

        async with uow:
            assert await uow.users.get_by_id(UserId("u-1")) is None
        assert [m.kind for m in await outbox.messages()] == [
            "user.registered",
            "user.deleted",
        ]

    @pytest.mark.asyncio
    async def test_remove_of_unpersisted_user_rejected(self, uow):
        async with uow:
            with pytest.raises(ConcurrencyException):
                await uow.users.remove(
                    User.register(UserId("u-9"), "Ghost", "ghost@example.com")
                )
