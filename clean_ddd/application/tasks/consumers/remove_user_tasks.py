"""Cascade UserDeleted → видалити tasks цього user.

Кожен task видаляється в окремій транзакції (один aggregate на commit),
кожна з власним UnitOfWork з factory, тому перекриті доставки того самого
UserDeleted не ділять session. Consumer idempotent: task якого вже нема
(в тому числі видалений паралельною доставкою) просто пропускається.
"""

import logging
from typing import Callable

from clean_ddd.application.shared import UnitOfWork
from clean_ddd.application.tasks.queries import TaskQueries
from clean_ddd.domain.shared import ConcurrencyException, DomainEvent
from clean_ddd.domain.tasks import TaskId
from clean_ddd.domain.users import UserDeleted

logger = logging.getLogger(__name__)


class RemoveTasksOfDeletedUser:
    """Видаляє tasks видаленого user, по одному task на транзакцію.

    Example:
        >>> consumer = RemoveTasksOfDeletedUser(app.unit_of_work, app.task_queries)
        >>> event_bus.subscribe(UserDeleted, IdempotentConsumer(consumer.handle))
    """

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        task_queries: TaskQueries,
    ) -> None:
        self.uow_factory = uow_factory
        self.task_queries = task_queries

    async def handle(self, event: DomainEvent) -> None:
        if not isinstance(event, UserDeleted):
            raise TypeError(f"Expected UserDeleted, got {type(event).__name__}")

        tasks = await self.task_queries.list_by_user(event.aggregate_id)
        removed = 0
        for task_dto in tasks:
            task_id = TaskId(task_dto.id)
            try:
                if await self._remove_task(task_id):
                    removed += 1
            except ConcurrencyException:
                if await self._task_exists(task_id):
                    raise
                logger.debug(
                    "user_tasks.already_removed",
                    extra={"task_id": task_dto.id, "event_id": str(event.event_id)},
                )

        logger.info(
            "user_tasks.removed",
            extra={
                "user_id": event.aggregate_id,
                "removed": removed,
                "event_id": str(event.event_id),
            },
        )

    async def _remove_task(self, task_id: TaskId) -> bool:
        async with self.uow_factory() as uow:
            task = await uow.tasks.get_by_id(task_id)
            if task is None:
                return False
            task.delete()
            await uow.tasks.remove(task)
            await uow.commit()
            task.clear_pending_events()
        return True

    async def _task_exists(self, task_id: TaskId) -> bool:
        async with self.uow_factory() as uow:
            return await uow.tasks.get_by_id(task_id) is not None
