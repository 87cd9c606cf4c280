"""User commands."""

from dataclasses import dataclass

from clean_ddd.application.shared import Command


@dataclass(frozen=True)
class RegisterUserCommand(Command):
    name: str
    email: str


@dataclass(frozen=True)
class UpdateUserCommand(Command):
    """Replace name та email (обидва поля обов'язкові)."""

    user_id: str
    name: str
    email: str


@dataclass(frozen=True)
class DeleteUserCommand(Command):
    """Delete user.

    Tasks користувача видаляються асинхронно consumer-ом UserDeleted.
    """

    user_id: str
