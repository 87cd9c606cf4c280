"""Task Mapper - Task aggregate ↔ TaskModel ORM."""

from clean_ddd.domain.tasks import Task, TaskId
from clean_ddd.domain.users import UserId
from clean_ddd.infrastructure.persistence.sqlalchemy.models import TaskModel


class TaskMapper:
    def to_entity(self, model: TaskModel) -> Task:
        return Task.reconstitute(
            id=TaskId(model.id),
            user_id=UserId(model.user_id),
            title=model.title,
            description=model.description,
            completed=model.completed,
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )

    def to_model(self, entity: Task) -> TaskModel:
        return TaskModel(
            id=str(entity.id),
            user_id=str(entity.user_id),
            title=entity.title,
            description=entity.description,
            completed=entity.is_completed,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            version=entity.version + 1,
        )

    def update_model_from_entity(self, model: TaskModel, entity: Task) -> TaskModel:
        model.title = entity.title
        model.description = entity.description
        model.completed = entity.is_completed
        model.updated_at = entity.updated_at
        model.version = entity.version + 1
        return model
