"""Mappers for Domain ↔ ORM conversion."""

from .order_mapper import OrderMapper
from .task_mapper import TaskMapper
from .user_mapper import UserMapper

__all__ = ["OrderMapper", "UserMapper", "TaskMapper"]
