"""Integration tests для users та tasks use cases.

Включно з cascade: UserDeleted → RemoveTasksOfDeletedUser через outbox relay.
"""

import asyncio

import pytest

from clean_ddd.application.tasks import (
    CompleteTaskCommand,
    CreateTaskCommand,
    DeleteTaskCommand,
    GetTaskQuery,
    ListTasksQuery,
    RemoveTasksOfDeletedUser,
)
from clean_ddd.application.users import (
    DeleteUserCommand,
    GetUserQuery,
    ListUsersQuery,
    RegisterUserCommand,
    UpdateUserCommand,
)
from clean_ddd.domain.shared import (
    AggregateAlreadyExists,
    AggregateNotFound,
    InvalidEmailError,
    InvalidStateTransition,
)
from clean_ddd.domain.users import UserDeleted


async def _register(app, name="Alice", email="alice@example.com"):
    return await app.register_user().handle(RegisterUserCommand(name=name, email=email))


class TestUsers:
    @pytest.mark.asyncio
    async def test_register_and_get(self, app):
        registered = await _register(app)

        fetched = await app.get_user().handle(GetUserQuery(registered.id))

        assert fetched == registered
        assert fetched.version == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, app):
        await _register(app)

        with pytest.raises(AggregateAlreadyExists):
            await _register(app, name="Other Alice")

        assert len(await app.list_users().handle(ListUsersQuery())) == 1

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, app):
        with pytest.raises(InvalidEmailError):
            await _register(app, email="nope")

    @pytest.mark.asyncio
    async def test_update(self, app):
        user = await _register(app)

        updated = await app.update_user().handle(
            UpdateUserCommand(user.id, "Alice B.", "alice.b@example.com")
        )

        assert updated.name == "Alice B."
        assert updated.version == 2
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_to_taken_email_rejected(self, app):
        alice = await _register(app)
        await _register(app, name="Bob", email="bob@example.com")

        with pytest.raises(AggregateAlreadyExists):
            await app.update_user().handle(
                UpdateUserCommand(alice.id, "Alice", "bob@example.com")
            )

    @pytest.mark.asyncio
    async def test_list_users_in_creation_order(self, app):
        await _register(app, "A", "a@example.com")
        await _register(app, "B", "b@example.com")

        users = await app.list_users().handle(ListUsersQuery())

        assert [u.name for u in users] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_unknown_user(self, app):
        with pytest.raises(AggregateNotFound):
            await app.get_user().handle(GetUserQuery("missing"))
        with pytest.raises(AggregateNotFound):
            await app.delete_user().handle(DeleteUserCommand("missing"))


class TestTasks:
    @pytest.mark.asyncio
    async def test_create_requires_existing_user(self, app):
        with pytest.raises(AggregateNotFound):
            await app.create_task().handle(CreateTaskCommand("missing", "Write"))

        assert await app.list_tasks().handle(ListTasksQuery()) == []

    @pytest.mark.asyncio
    async def test_create_complete_delete(self, app):
        user = await _register(app)
        task = await app.create_task().handle(
            CreateTaskCommand(user.id, "Write report", "Q3")
        )

        completed = await app.complete_task().handle(CompleteTaskCommand(task.id))
        assert completed.completed is True

        with pytest.raises(InvalidStateTransition):
            await app.complete_task().handle(CompleteTaskCommand(task.id))

        await app.delete_task().handle(DeleteTaskCommand(task.id))
        with pytest.raises(AggregateNotFound):
            await app.get_task().handle(GetTaskQuery(task.id))

    @pytest.mark.asyncio
    async def test_list_tasks_by_user(self, app):
        alice = await _register(app)
        bob = await _register(app, "Bob", "bob@example.com")
        await app.create_task().handle(CreateTaskCommand(alice.id, "A1"))
        await app.create_task().handle(CreateTaskCommand(bob.id, "B1"))
        await app.create_task().handle(CreateTaskCommand(alice.id, "A2"))

        alice_tasks = await app.list_tasks().handle(ListTasksQuery(user_id=alice.id))
        all_tasks = await app.list_tasks().handle(ListTasksQuery())

        assert [t.title for t in alice_tasks] == ["A1", "A2"]
        assert len(all_tasks) == 3


class TestUserDeletionCascade:
    @pytest.mark.asyncio
    async def test_tasks_removed_after_relay(self, app):
        alice = await _register(app)
        bob = await _register(app, "Bob", "bob@example.com")
        await app.create_task().handle(CreateTaskCommand(alice.id, "A1"))
        await app.create_task().handle(CreateTaskCommand(alice.id, "A2"))
        await app.create_task().handle(CreateTaskCommand(bob.id, "B1"))

        await app.delete_user().handle(DeleteUserCommand(alice.id))

        # до relay tasks ще існують (eventual consistency)
        assert len(await app.list_tasks().handle(ListTasksQuery(user_id=alice.id))) == 2

        await app.relay.drain()

        assert await app.list_tasks().handle(ListTasksQuery(user_id=alice.id)) == []
        remaining = await app.list_tasks().handle(ListTasksQuery())
        assert [t.title for t in remaining] == ["B1"]
        kinds = [m.kind for m in await app.outbox.messages()]
        assert kinds.count("task.deleted") == 2

    @pytest.mark.asyncio
    async def test_redelivered_user_deleted_is_harmless(self, app):
        alice = await _register(app)
        await app.create_task().handle(CreateTaskCommand(alice.id, "A1"))
        await app.delete_user().handle(DeleteUserCommand(alice.id))
        await app.relay.drain()

        messages = await app.outbox.messages()
        (deleted,) = [m.event for m in messages if m.kind == "user.deleted"]

        await app.event_bus.publish(deleted)

        consumer = RemoveTasksOfDeletedUser(app.unit_of_work, app.task_queries)
        await consumer.handle(deleted)

        assert len(await app.outbox.messages()) == len(messages)

    @pytest.mark.asyncio
    async def test_overlapping_deliveries_use_separate_units_of_work(self, app):
        alice = await _register(app)
        await app.create_task().handle(CreateTaskCommand(alice.id, "A1"))
        await app.create_task().handle(CreateTaskCommand(alice.id, "A2"))
        await app.delete_user().handle(DeleteUserCommand(alice.id))
        (deleted,) = [
            m.event for m in await app.outbox.messages() if m.kind == "user.deleted"
        ]
        consumer = RemoveTasksOfDeletedUser(app.unit_of_work, app.task_queries)

        # дві доставки того самого UserDeleted одночасно
        await asyncio.gather(consumer.handle(deleted), consumer.handle(deleted))

        assert await app.list_tasks().handle(ListTasksQuery(user_id=alice.id)) == []
        kinds = [m.kind for m in await app.outbox.messages()]
        assert kinds.count("task.deleted") == 2

    @pytest.mark.asyncio
    async def test_consumer_rejects_other_events(self, app):
        consumer = RemoveTasksOfDeletedUser(app.unit_of_work, app.task_queries)

        with pytest.raises(TypeError):
            await consumer.handle(object())  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_user_deleted_is_subscribed(self, app):
        assert app.event_bus.subscribers_count(UserDeleted) == 1
