"""User command handlers."""

import logging

from clean_ddd.application.shared import CommandHandler, UnitOfWork
from clean_ddd.application.users.commands import (
    DeleteUserCommand,
    RegisterUserCommand,
    UpdateUserCommand,
)
from clean_ddd.application.users.dtos import UserDTO
from clean_ddd.domain.shared import AggregateNotFound
from clean_ddd.domain.users import User, UserId

logger = logging.getLogger(__name__)


class RegisterUserHandler(CommandHandler[RegisterUserCommand, UserDTO]):
    """Register new user.

    Raises:
        ValidationError: Порожнє ім'я або невалідний email.
        AggregateAlreadyExists: Email вже зайнятий.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: RegisterUserCommand) -> UserDTO:
        async with self.uow:
            user = User.register(
                user_id=self.uow.users.next_identity(),
                name=command.name,
                email=command.email,
            )
            await self.uow.users.save(user)
            await self.uow.commit()
            user.clear_pending_events()

        logger.info("user.registered", extra={"user_id": str(user.id)})
        return UserDTO.from_entity(user)


class UpdateUserHandler(CommandHandler[UpdateUserCommand, UserDTO]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: UpdateUserCommand) -> UserDTO:
        async with self.uow:
            user = await _load_user(self.uow, command.user_id)
            user.update_profile(name=command.name, email=command.email)

            await self.uow.users.save(user)
            await self.uow.commit()
            user.clear_pending_events()

        logger.info(
            "user.updated", extra={"user_id": str(user.id), "version": user.version}
        )
        return UserDTO.from_entity(user)


class DeleteUserHandler(CommandHandler[DeleteUserCommand, None]):
    """Delete user; UserDeleted йде в outbox разом з видаленням."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: DeleteUserCommand) -> None:
        async with self.uow:
            user = await _load_user(self.uow, command.user_id)
            user.delete()

            await self.uow.users.remove(user)
            await self.uow.commit()
            user.clear_pending_events()

        logger.info("user.deleted", extra={"user_id": command.user_id})


async def _load_user(uow: UnitOfWork, user_id: str) -> User:
    user = await uow.users.get_by_id(UserId(user_id))
    if user is None:
        raise AggregateNotFound("User not found", user_id=user_id)
    return user
