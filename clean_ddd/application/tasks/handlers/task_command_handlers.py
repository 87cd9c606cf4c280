"""Task command handlers."""

import logging

from clean_ddd.application.shared import CommandHandler, UnitOfWork
from clean_ddd.application.tasks.commands import (
    CompleteTaskCommand,
    CreateTaskCommand,
    DeleteTaskCommand,
)
from clean_ddd.application.tasks.dtos import TaskDTO
from clean_ddd.domain.shared import AggregateNotFound
from clean_ddd.domain.tasks import Task, TaskId
from clean_ddd.domain.users import UserId

logger = logging.getLogger(__name__)


class CreateTaskHandler(CommandHandler[CreateTaskCommand, TaskDTO]):
    """Create task.

    User тільки читається (перевірка існування), змінюється лише Task.

    Raises:
        AggregateNotFound: User не існує.
        ValidationError: Порожній title.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: CreateTaskCommand) -> TaskDTO:
        async with self.uow:
            user_id = UserId(command.user_id)
            owner = await self.uow.users.get_by_id(user_id)
            if owner is None:
                raise AggregateNotFound("User not found", user_id=command.user_id)

            task = Task.create(
                task_id=self.uow.tasks.next_identity(),
                user_id=user_id,
                title=command.title,
                description=command.description,
            )
            await self.uow.tasks.save(task)
            await self.uow.commit()
            task.clear_pending_events()

        logger.info(
            "task.created",
            extra={"task_id": str(task.id), "user_id": command.user_id},
        )
        return TaskDTO.from_entity(task)


class CompleteTaskHandler(CommandHandler[CompleteTaskCommand, TaskDTO]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: CompleteTaskCommand) -> TaskDTO:
        async with self.uow:
            task = await _load_task(self.uow, command.task_id)
            task.complete()

            await self.uow.tasks.save(task)
            await self.uow.commit()
            task.clear_pending_events()

        logger.info("task.completed", extra={"task_id": command.task_id})
        return TaskDTO.from_entity(task)


class DeleteTaskHandler(CommandHandler[DeleteTaskCommand, None]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: DeleteTaskCommand) -> None:
        async with self.uow:
            task = await _load_task(self.uow, command.task_id)
            task.delete()

            await self.uow.tasks.remove(task)
            await self.uow.commit()
            task.clear_pending_events()

        logger.info("task.deleted", extra={"task_id": command.task_id})


async def _load_task(uow: UnitOfWork, task_id: str) -> Task:
    task = await uow.tasks.get_by_id(TaskId(task_id))
    if task is None:
        raise AggregateNotFound("Task not found", task_id=task_id)
    return task
