"""SQLAlchemy repository implementations."""

from .base import StagedChanges
from .order_repository import SQLAlchemyOrderRepository
from .task_repository import SQLAlchemyTaskRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "StagedChanges",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyTaskRepository",
]
