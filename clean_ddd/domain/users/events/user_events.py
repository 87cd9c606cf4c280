"""Domain Events для Users bounded context."""

from dataclasses import dataclass
from typing import ClassVar, Union, get_args

from clean_ddd.domain.shared import DomainEvent


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    kind: ClassVar[str] = "user.registered"

    name: str
    email: str


@dataclass(frozen=True)
class UserProfileUpdated(DomainEvent):
    kind: ClassVar[str] = "user.profile_updated"

    name: str
    email: str


@dataclass(frozen=True)
class UserDeleted(DomainEvent):
    """Event: користувача видалено.

    Tasks context реагує на цю подію і видаляє tasks користувача
    (eventual consistency між aggregates).
    """

    kind: ClassVar[str] = "user.deleted"


UserEvent = Union[UserRegistered, UserProfileUpdated, UserDeleted]

USER_EVENT_TYPES: tuple[type[DomainEvent], ...] = get_args(UserEvent)
