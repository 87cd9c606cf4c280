"""User application layer."""

from .commands import DeleteUserCommand, RegisterUserCommand, UpdateUserCommand
from .dtos import UserDTO
from .queries import GetUserQuery, ListUsersQuery, UserQueries
from .handlers import (
    DeleteUserHandler,
    GetUserHandler,
    ListUsersHandler,
    RegisterUserHandler,
    UpdateUserHandler,
)

__all__ = [
    "RegisterUserCommand",
    "UpdateUserCommand",
    "DeleteUserCommand",
    "GetUserQuery",
    "ListUsersQuery",
    "UserQueries",
    "UserDTO",
    "RegisterUserHandler",
    "UpdateUserHandler",
    "DeleteUserHandler",
    "GetUserHandler",
    "ListUsersHandler",
]
