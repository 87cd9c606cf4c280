"""UserRepository Port."""

from abc import ABC, abstractmethod
from typing import Optional

from clean_ddd.domain.shared import UserId

from ..entities import User


class UserRepository(ABC):
    """Abstract interface для user persistence."""

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert або update user.

        Raises:
            AggregateAlreadyExists: Якщо email вже зайнятий іншим user.
            ConcurrencyException: Якщо версія застаріла.
        """
        pass

    @abstractmethod
    async def remove(self, user: User) -> None:
        """Physically delete user (після `user.delete()`).

        Pending events (UserDeleted) все одно потрапляють в outbox.

        Raises:
            ConcurrencyException: Якщо версія застаріла.
        """
        pass

    @abstractmethod
    def next_identity(self) -> UserId:
        pass
