"""User queries та read-side port."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from clean_ddd.application.shared import Query
from clean_ddd.application.users.dtos import UserDTO


@dataclass(frozen=True)
class GetUserQuery(Query):
    user_id: str


@dataclass(frozen=True)
class ListUsersQuery(Query):
    """All users, ordered by created_at."""


class UserQueries(ABC):
    """Read model port для users.

    Query side читає напряму з read storage, без aggregates та repositories.
    """

    @abstractmethod
    async def get(self, user_id: str) -> Optional[UserDTO]:
        pass

    @abstractmethod
    async def list_all(self) -> list[UserDTO]:
        pass
