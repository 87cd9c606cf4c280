"""SQLAlchemy ORM models."""

from .base import Base, UTCDateTime
from .order_model import OrderItemModel, OrderModel
from .outbox_model import OutboxMessageModel
from .task_model import TaskModel
from .user_model import UserModel

__all__ = [
    "Base",
    "UTCDateTime",
    "OrderModel",
    "OrderItemModel",
    "UserModel",
    "TaskModel",
    "OutboxMessageModel",
]
