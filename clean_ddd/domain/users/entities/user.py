"""User Aggregate Root."""

from datetime import datetime, timezone
from typing import Optional

from clean_ddd.domain.shared import (
    DomainEvent,
    Email,
    Entity,
    InvalidStateTransition,
    PendingEvents,
    UserId,
    validate_value_object,
)

from ..events.user_events import UserDeleted, UserProfileUpdated, UserRegistered


def _validated_name(name: str) -> str:
    validate_value_object(
        isinstance(name, str) and bool(name.strip()), "Name cannot be empty"
    )
    return name.strip()


class User(Entity[UserId]):
    """User Aggregate Root.

    Правила:
    - Ім'я не порожнє, email валідний (Email value object)
    - Email унікальний - це перевіряє persistence, не aggregate
    - Видалення - це подія UserDeleted; фізичне видалення робить repository
    """

    def __init__(
        self,
        id: UserId,
        name: str,
        email: Email,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        is_deleted: bool = False,
        version: int = 0,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._created_at = created_at or datetime.now(timezone.utc)
        self._updated_at = updated_at
        self._is_deleted = is_deleted

        self.version = version
        self._events = PendingEvents()

    @classmethod
    def register(cls, user_id: UserId, name: str, email: str) -> "User":
        """Factory method для нового користувача.

        Raises:
            ValidationError: Якщо ім'я порожнє.
            InvalidEmailError: Якщо email невалідний.
        """
        user = cls(id=user_id, name=_validated_name(name), email=Email(email))
        user._events.record(
            UserRegistered(
                aggregate_id=str(user_id), name=user._name, email=str(user._email)
            )
        )
        return user

    @classmethod
    def reconstitute(
        cls,
        id: UserId,
        name: str,
        email: Email,
        created_at: datetime,
        updated_at: Optional[datetime],
        version: int,
    ) -> "User":
        """Rebuild user from persistence (bypasses business rules)."""
        return cls(
            id=id,
            name=name,
            email=email,
            created_at=created_at,
            updated_at=updated_at,
            version=version,
        )

    def update_profile(self, name: str, email: str) -> None:
        """Update ім'я та email разом.

        Обидва значення валідуються до зміни стану.
        """
        self._ensure_not_deleted("update profile")
        new_name = _validated_name(name)
        new_email = Email(email)

        self._name = new_name
        self._email = new_email
        self._updated_at = datetime.now(timezone.utc)
        self._events.record(
            UserProfileUpdated(
                aggregate_id=str(self.id), name=new_name, email=str(new_email)
            )
        )

    def delete(self) -> None:
        """Mark user deleted (emits UserDeleted)."""
        self._ensure_not_deleted("delete")

        self._is_deleted = True
        self._events.record(UserDeleted(aggregate_id=str(self.id)))

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

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
                f"Cannot {operation}: user is deleted", user_id=str(self.id)
            )
