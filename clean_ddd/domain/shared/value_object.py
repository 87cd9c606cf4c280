"""Base ValueObject class for domain model.

ValueObject - immutable об'єкт, який порівнюється за значенням атрибутів,
а не за ідентичністю. Два VO з однаковими атрибутами - це один і той же об'єкт.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Type

from .exceptions import ValidationError


@dataclass(frozen=True, eq=True)
class ValueObject(ABC):
    """Base class for all domain value objects.

    ValueObject характеристики:
    - **Immutable**: Не можна змінити після створення (frozen=True)
    - **Equality by value**: Порівнюється за значенням атрибутів, не за ID
    - **No identity**: Не має власного ID
    - **Replaceable**: Якщо треба змінити, створюємо новий VO

    Example:
        >>> @dataclass(frozen=True)
        ... class Quantity(ValueObject):
        ...     value: int
        ...
        ...     def __post_init__(self) -> None:
        ...         validate_value_object(self.value > 0, "Quantity must be positive")

        >>> Quantity(2) == Quantity(2)  # True (same value)
        >>> Quantity(0)  # ValidationError
    """

    def __post_init__(self) -> None:
        """Hook для валідації після ініціалізації.

        Override цей метод для додавання правил валідації.

        Raises:
            ValidationError: If validation fails.
        """
        pass


def validate_value_object(
    condition: bool,
    message: str,
    error: Type[ValidationError] = ValidationError,
    **context: object,
) -> None:
    """Helper для валідації в value objects.

    Args:
        condition: Умова яка має бути True.
        message: Повідомлення помилки якщо condition False.
        error: Конкретний підклас ValidationError.
        **context: Додатковий context для exception.

    Raises:
        ValidationError: If condition is False.

    Example:
        >>> validate_value_object(amount >= 0, "Amount must be non-negative")
    """
    if not condition:
        raise error(message, **context)
