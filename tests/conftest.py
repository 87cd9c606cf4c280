"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from clean_ddd.bootstrap import Application, bootstrap
from clean_ddd.config import Settings
from clean_ddd.domain.ordering import (
    CustomerId,
    Order,
    OrderId,
    ProductId,
    ShippingAddress,
)
from clean_ddd.domain.shared import Money
from clean_ddd.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyOutbox,
    SQLAlchemyUnitOfWork,
)


@pytest.fixture
def settings() -> Settings:
    """Settings без .env файлу та env overrides."""
    return Settings(_env_file=None, default_currency="USD", outbox_batch_size=50)


@pytest.fixture
def address() -> ShippingAddress:
    return ShippingAddress(
        recipient="Olena Kovalenko",
        street="Khreshchatyk 1",
        city="Kyiv",
        postal_code="01001",
        country="ua",
    )


@pytest.fixture
def draft_order() -> Order:
    """Draft order без items (буфер подій очищено)."""
    order = Order.create(
        order_id=OrderId("o-1"),
        customer_id=CustomerId("c-1"),
        currency="USD",
    )
    order.clear_pending_events()
    return order


@pytest.fixture
def confirmed_order(draft_order: Order, address: ShippingAddress) -> Order:
    draft_order.add_item(ProductId("p-1"), Money(Decimal("10"), "USD"), 2)
    draft_order.set_shipping_address(address)
    draft_order.confirm()
    draft_order.clear_pending_events()
    return draft_order


@pytest.fixture
async def database():
    """In-memory SQLite database з усіма tables.

    Returns:
        Database (engine disposed після тесту).
    """
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_all()

    yield database

    # Cleanup
    await database.dispose()


@pytest.fixture
def uow(database: Database) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(database)


@pytest.fixture
def outbox(database: Database) -> SQLAlchemyOutbox:
    return SQLAlchemyOutbox(database)


@pytest.fixture
async def app(settings: Settings):
    """Wired Application над власною in-memory database."""
    app = await bootstrap(settings, configure_logging=False)

    yield app

    await app.close()
