"""Users Bounded Context - Domain Layer."""

from clean_ddd.domain.shared import UserId

from .entities import User
from .events import (
    USER_EVENT_TYPES,
    UserDeleted,
    UserEvent,
    UserProfileUpdated,
    UserRegistered,
)
from .repositories import UserRepository

__all__ = [
    "User",
    "UserId",
    "UserEvent",
    "USER_EVENT_TYPES",
    "UserRegistered",
    "UserProfileUpdated",
    "UserDeleted",
    "UserRepository",
]
