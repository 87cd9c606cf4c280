"""Composition root - збирає adapters, bus, relay та handlers.

Domain та application не імпортують infrastructure; залежності
з'єднуються тільки тут.

Usage:
    app = await bootstrap()
    order = await app.place_order().handle(PlaceOrderCommand(...))
    await app.relay.drain()
    app.order_summaries.get(order.id)
    await app.close()
"""

import logging
from dataclasses import dataclass
from typing import Optional

from clean_ddd.application.ordering import (
    AddOrderItemHandler,
    CancelOrderHandler,
    ConfirmOrderHandler,
    DeliverOrderHandler,
    GetOrderHandler,
    GetOrderSummaryHandler,
    OrderSummaryProjection,
    PlaceOrderHandler,
    RemoveOrderItemHandler,
    SetShippingAddressHandler,
    ShipOrderHandler,
)
from clean_ddd.application.tasks import (
    CompleteTaskHandler,
    CreateTaskHandler,
    DeleteTaskHandler,
    GetTaskHandler,
    ListTasksHandler,
    RemoveTasksOfDeletedUser,
)
from clean_ddd.application.users import (
    DeleteUserHandler,
    GetUserHandler,
    ListUsersHandler,
    RegisterUserHandler,
    UpdateUserHandler,
)
from clean_ddd.config import Settings, get_settings, setup_logging
from clean_ddd.domain.users import UserDeleted
from clean_ddd.infrastructure.messaging import EventBus, IdempotentConsumer, OutboxRelay
from clean_ddd.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyOutbox,
    SQLAlchemyTaskQueries,
    SQLAlchemyUnitOfWork,
    SQLAlchemyUserQueries,
)

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """Wired application container.

    Command handlers створюються на кожен виклик з новим UnitOfWork,
    тому паралельні use cases не ділять одну транзакцію.
    """

    settings: Settings
    database: Database
    outbox: SQLAlchemyOutbox
    event_bus: EventBus
    relay: OutboxRelay
    order_summaries: OrderSummaryProjection
    user_queries: SQLAlchemyUserQueries
    task_queries: SQLAlchemyTaskQueries

    def unit_of_work(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self.database)

    async def close(self) -> None:
        """Dispose engine (connection pool)."""
        await self.database.dispose()
        logger.info("application.closed")

    # ==================== Ordering ====================

    def place_order(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(self.unit_of_work(), self.settings.default_currency)

    def add_order_item(self) -> AddOrderItemHandler:
        return AddOrderItemHandler(self.unit_of_work())

    def remove_order_item(self) -> RemoveOrderItemHandler:
        return RemoveOrderItemHandler(self.unit_of_work())

    def set_shipping_address(self) -> SetShippingAddressHandler:
        return SetShippingAddressHandler(self.unit_of_work())

    def confirm_order(self) -> ConfirmOrderHandler:
        return ConfirmOrderHandler(self.unit_of_work())

    def ship_order(self) -> ShipOrderHandler:
        return ShipOrderHandler(self.unit_of_work())

    def deliver_order(self) -> DeliverOrderHandler:
        return DeliverOrderHandler(self.unit_of_work())

    def cancel_order(self) -> CancelOrderHandler:
        return CancelOrderHandler(self.unit_of_work())

    def get_order(self) -> GetOrderHandler:
        return GetOrderHandler(self.unit_of_work())

    def get_order_summary(self) -> GetOrderSummaryHandler:
        return GetOrderSummaryHandler(self.order_summaries)

    # ==================== Users ====================

    def register_user(self) -> RegisterUserHandler:
        return RegisterUserHandler(self.unit_of_work())

    def update_user(self) -> UpdateUserHandler:
        return UpdateUserHandler(self.unit_of_work())

    def delete_user(self) -> DeleteUserHandler:
        return DeleteUserHandler(self.unit_of_work())

    def get_user(self) -> GetUserHandler:
        return GetUserHandler(self.user_queries)

    def list_users(self) -> ListUsersHandler:
        return ListUsersHandler(self.user_queries)

    # ==================== Tasks ====================

    def create_task(self) -> CreateTaskHandler:
        return CreateTaskHandler(self.unit_of_work())

    def complete_task(self) -> CompleteTaskHandler:
        return CompleteTaskHandler(self.unit_of_work())

    def delete_task(self) -> DeleteTaskHandler:
        return DeleteTaskHandler(self.unit_of_work())

    def get_task(self) -> GetTaskHandler:
        return GetTaskHandler(self.task_queries)

    def list_tasks(self) -> ListTasksHandler:
        return ListTasksHandler(self.task_queries)


async def bootstrap(
    settings: Optional[Settings] = None,
    configure_logging: bool = True,
) -> Application:
    """Build Application з SQLAlchemy adapters.

    Створює engine за settings.database_url та tables (create_all).

    Args:
        settings: Override settings (default: get_settings()).
        configure_logging: False в тестах, щоб не чіпати root logger.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    database = Database(settings.database_url, echo=settings.db_echo)
    await database.create_all()

    outbox = SQLAlchemyOutbox(database)
    event_bus = EventBus()
    relay = OutboxRelay(outbox, event_bus, batch_size=settings.outbox_batch_size)

    order_summaries = OrderSummaryProjection()
    order_summaries.subscribe_to(event_bus)

    user_queries = SQLAlchemyUserQueries(database)
    task_queries = SQLAlchemyTaskQueries(database)

    app = Application(
        settings=settings,
        database=database,
        outbox=outbox,
        event_bus=event_bus,
        relay=relay,
        order_summaries=order_summaries,
        user_queries=user_queries,
        task_queries=task_queries,
    )

    # Новий UnitOfWork на кожен task
    remove_user_tasks = RemoveTasksOfDeletedUser(app.unit_of_work, task_queries)
    event_bus.subscribe(
        UserDeleted,
        IdempotentConsumer(remove_user_tasks.handle, name="remove_user_tasks"),
    )

    logger.info(
        "application.bootstrapped",
        extra={
            "app_name": settings.app_name,
            "environment": settings.environment,
            "default_currency": settings.default_currency,
            "database": database.url.get_backend_name(),
        },
    )
    return app
