"""User use case handlers."""

from .user_command_handlers import (
    DeleteUserHandler,
    RegisterUserHandler,
    UpdateUserHandler,
)
from .user_query_handlers import GetUserHandler, ListUsersHandler

__all__ = [
    "RegisterUserHandler",
    "UpdateUserHandler",
    "DeleteUserHandler",
    "GetUserHandler",
    "ListUsersHandler",
]
