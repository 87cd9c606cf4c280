"""User commands (write operations)."""

from .user_commands import DeleteUserCommand, RegisterUserCommand, UpdateUserCommand

__all__ = ["RegisterUserCommand", "UpdateUserCommand", "DeleteUserCommand"]
