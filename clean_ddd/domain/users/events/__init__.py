"""Events для Users bounded context."""

from .user_events import (
    USER_EVENT_TYPES,
    UserDeleted,
    UserEvent,
    UserProfileUpdated,
    UserRegistered,
)

__all__ = [
    "UserEvent",
    "USER_EVENT_TYPES",
    "UserRegistered",
    "UserProfileUpdated",
    "UserDeleted",
]
