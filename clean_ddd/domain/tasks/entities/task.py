"""Task Aggregate Root."""

from datetime import datetime, timezone
from typing import Optional

from clean_ddd.domain.shared import (
    DomainEvent,
    Entity,
    InvalidStateTransition,
    PendingEvents,
    UserId,
    validate_value_object,
)

from ..events.task_events import TaskCompleted, TaskCreated, TaskDeleted
from ..value_objects import TaskId


class Task(Entity[TaskId]):
    """Task Aggregate Root.

    Task посилається на власника тільки через UserId: User і Task - різні
    aggregates з окремими транзакціями.

    Example:
        >>> task = Task.create(TaskId.generate(), UserId("u-1"), "Buy milk")
        >>> task.complete()
        >>> task.complete()  # InvalidStateTransition
    """

    def __init__(
        self,
        id: TaskId,
        user_id: UserId,
        title: str,
        description: str = "",
        completed: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        is_deleted: bool = False,
        version: int = 0,
    ) -> None:
        super().__init__(id)
        self._user_id = user_id
        self._title = title
        self._description = description
        self._completed = completed
        self._created_at = created_at or datetime.now(timezone.utc)
        self._updated_at = updated_at
        self._is_deleted = is_deleted

        self.version = version
        self._events = PendingEvents()

    @classmethod
    def create(
        cls,
        task_id: TaskId,
        user_id: UserId,
        title: str,
        description: str = "",
    ) -> "Task":
        """Factory method для нового task.

        Raises:
            ValidationError: Якщо title порожній.
        """
        validate_value_object(
            isinstance(title, str) and bool(title.strip()), "Title cannot be empty"
        )
        task = cls(
            id=task_id,
            user_id=user_id,
            title=title.strip(),
            description=description or "",
        )
        task._events.record(
            TaskCreated(
                aggregate_id=str(task_id),
                user_id=str(user_id),
                title=task._title,
            )
        )
        return task

    @classmethod
    def reconstitute(
        cls,
        id: TaskId,
        user_id: UserId,
        title: str,
        description: str,
        completed: bool,
        created_at: datetime,
        updated_at: Optional[datetime],
        version: int,
    ) -> "Task":
        """Rebuild task from persistence (bypasses business rules)."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            description=description,
            completed=completed,
            created_at=created_at,
            updated_at=updated_at,
            version=version,
        )

    def complete(self) -> None:
        """Mark task as completed.

        Raises:
            InvalidStateTransition: Якщо task вже completed або deleted.
        """
        self._ensure_not_deleted("complete task")
        if self._completed:
            raise InvalidStateTransition(
                "Task is already completed", task_id=str(self.id)
            )

        self._completed = True
        self._updated_at = datetime.now(timezone.utc)
        self._events.record(
            TaskCompleted(aggregate_id=str(self.id), user_id=str(self._user_id))
        )

    def delete(self) -> None:
        self._ensure_not_deleted("delete task")

        self._is_deleted = True
        self._events.record(
            TaskDeleted(aggregate_id=str(self.id), user_id=str(self._user_id))
        )

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    def pending_events(self) -> tuple[DomainEvent, ...]:
        return self._events.snapshot()

    def clear_pending_events(self) -> None:
        self._events.clear()

    def _ensure_not_deleted(self, operation: str) -> None:
        if self._is_deleted:
            raise InvalidStateTransition(
                f"Cannot {operation}: task is deleted", task_id=str(self.id)
            )
