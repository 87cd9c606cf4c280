"""Task commands."""

from dataclasses import dataclass

from clean_ddd.application.shared import Command


@dataclass(frozen=True)
class CreateTaskCommand(Command):
    """Create task для існуючого user."""

    user_id: str
    title: str
    description: str = ""


@dataclass(frozen=True)
class CompleteTaskCommand(Command):
    task_id: str


@dataclass(frozen=True)
class DeleteTaskCommand(Command):
    task_id: str
