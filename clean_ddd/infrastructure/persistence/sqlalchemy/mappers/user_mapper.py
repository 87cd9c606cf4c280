"""User Mapper - User aggregate ↔ UserModel ORM."""

from clean_ddd.domain.shared import Email
from clean_ddd.domain.users import User, UserId
from clean_ddd.infrastructure.persistence.sqlalchemy.models import UserModel


class UserMapper:
    def to_entity(self, model: UserModel) -> User:
        return User.reconstitute(
            id=UserId(model.id),
            name=model.name,
            email=Email(model.email),
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )

    def to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=str(entity.id),
            name=entity.name,
            email=str(entity.email),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            version=entity.version + 1,
        )

    def update_model_from_entity(self, model: UserModel, entity: User) -> UserModel:
        model.name = entity.name
        model.email = str(entity.email)
        model.updated_at = entity.updated_at
        model.version = entity.version + 1
        return model
