"""Task DTOs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from clean_ddd.domain.tasks import Task


@dataclass(frozen=True)
class TaskDTO:
    id: str
    user_id: str
    title: str
    description: str
    completed: bool
    created_at: datetime
    updated_at: Optional[datetime]
    version: int

    @classmethod
    def from_entity(cls, task: Task) -> "TaskDTO":
        return cls(
            id=str(task.id),
            user_id=str(task.user_id),
            title=task.title,
            description=task.description,
            completed=task.is_completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
            version=task.version,
        )
