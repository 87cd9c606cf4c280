"""Typed identifiers.

Кожен aggregate і entity має власний тип ID, щоб OrderId не можна було
випадково передати туди де очікується CustomerId. Посилання між aggregates
тільки через ці ID, ніколи через прямі references.
"""

from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar
from uuid import uuid4

from .value_object import ValueObject, validate_value_object

TIdentifier = TypeVar("TIdentifier", bound="Identifier")


@dataclass(frozen=True)
class Identifier(ValueObject):
    """Opaque, non-empty string identifier.

    Example:
        >>> @dataclass(frozen=True)
        ... class OrderId(Identifier):
        ...     entity_name: ClassVar[str] = "Order"

        >>> OrderId.generate()          # OrderId(value='3f6c...')
        >>> OrderId("o-1") == OrderId("o-1")  # True
        >>> OrderId("")                 # ValidationError
    """

    entity_name: ClassVar[str] = "Entity"

    value: str

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.value, str) and bool(self.value.strip()),
            f"{self.entity_name} ID cannot be empty",
        )

    @classmethod
    def generate(cls: Type[TIdentifier]) -> TIdentifier:
        """Generate fresh unique identifier (UUID4)."""
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserId(Identifier):
    """Identity of a User aggregate (shared across contexts)."""

    entity_name: ClassVar[str] = "User"
