"""SQLAlchemy 2.0 async persistence adapters."""

from .database import Database
from .outbox import OutboxMessage, SQLAlchemyOutbox
from .queries import SQLAlchemyTaskQueries, SQLAlchemyUserQueries
from .repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyUserRepository,
)
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    "Database",
    "OutboxMessage",
    "SQLAlchemyOutbox",
    "SQLAlchemyUnitOfWork",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyTaskRepository",
    "SQLAlchemyUserQueries",
    "SQLAlchemyTaskQueries",
]
