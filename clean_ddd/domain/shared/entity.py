"""Base Entity class for domain model.

Entity - об'єкт з унікальною ідентичністю, який відрізняється від інших
не атрибутами, а ID. Два entity з однаковими атрибутами але різними ID -
це різні об'єкти.
"""

from typing import Generic, TypeVar

from .identifiers import Identifier

IdT = TypeVar("IdT", bound=Identifier)


class Entity(Generic[IdT]):
    """Identity + equality capability for entities and aggregate roots.

    ID призначається при створенні і ніколи не змінюється. Мутації тільки
    через intention-revealing методи конкретного entity, не через setters.

    Example:
        >>> item1 = OrderItem(OrderItemId("i-1"), product_id, price, Quantity(1))
        >>> item2 = OrderItem(OrderItemId("i-1"), product_id, price, Quantity(5))
        >>> item1 == item2  # True (same ID, "the same thing, possibly stale")
    """

    def __init__(self, id: IdT) -> None:
        """Initialize entity.

        Args:
            id: Typed identifier (OrderId, TaskId, ...).
        """
        if not isinstance(id, Identifier):
            raise TypeError(
                f"{self.__class__.__name__} id must be an Identifier, "
                f"got {type(id).__name__}"
            )
        self._id = id

    @property
    def id(self) -> IdT:
        """Get entity ID."""
        return self._id

    def __eq__(self, other: object) -> bool:
        """Entities порівнюються за ID, не за атрибутами.

        Args:
            other: Object to compare with.

        Returns:
            True if same entity type and same ID.
        """
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets/dicts."""
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            String like "Order(id=3f6c...)".
        """
        return f"{self.__class__.__name__}(id={self._id})"
