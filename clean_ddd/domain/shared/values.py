"""Shared value objects: Money, Quantity, Email.

Всі self-validating: некоректний екземпляр просто не можна створити.
Арифметика повертає новий екземпляр, старий не змінюється.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from email_validator import EmailNotValidError, validate_email

from .exceptions import (
    CurrencyMismatchError,
    InvalidEmailError,
    InvalidQuantityError,
    ValidationError,
)
from .value_object import ValueObject, validate_value_object

AmountLike = Union[Decimal, int, str]


def _to_decimal(value: AmountLike) -> Decimal:
    """Convert int/str/Decimal to Decimal (floats rejected - precision loss)."""
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(
            "Amount must be Decimal, int or str", value_type=type(value).__name__
        )
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError("Amount is not a number", value=value) from e
    if not result.is_finite():
        raise ValidationError("Amount must be finite", value=value)
    return result


@dataclass(frozen=True)
class Money(ValueObject):
    """Non-negative amount in a single currency.

    Example:
        >>> price = Money(Decimal("10"), "USD")
        >>> price.multiply(2)                     # Money(20, USD)
        >>> price.add(Money(Decimal("5"), "EUR"))  # CurrencyMismatchError
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        validate_value_object(
            isinstance(self.currency, str)
            and len(self.currency) == 3
            and self.currency.isalpha(),
            "Currency must be a 3-letter code",
            currency=self.currency,
        )
        object.__setattr__(self, "currency", self.currency.upper())
        validate_value_object(
            self.amount >= 0,
            "Amount cannot be negative",
            amount=str(self.amount),
        )

    @classmethod
    def zero(cls, currency: str) -> "Money":
        """Additive identity for the currency."""
        return cls(Decimal("0"), currency)

    def add(self, other: "Money") -> "Money":
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract money; result cannot go below zero.

        Raises:
            CurrencyMismatchError: Якщо валюти різні.
            ValidationError: Якщо результат від'ємний.
        """
        self._check_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: AmountLike) -> "Money":
        factor_value = _to_decimal(factor)
        validate_value_object(
            factor_value >= 0, "Factor cannot be negative", factor=str(factor_value)
        )
        return Money(self.amount * factor_value, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                "Cannot combine money in different currencies",
                left=self.currency,
                right=other.currency,
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class Quantity(ValueObject):
    """Strictly positive count of units."""

    value: int

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.value, int) and not isinstance(self.value, bool),
            "Quantity must be an integer",
            InvalidQuantityError,
            value=self.value,
        )
        validate_value_object(
            self.value > 0,
            "Quantity must be positive",
            InvalidQuantityError,
            value=self.value,
        )

    def add(self, other: "Quantity") -> "Quantity":
        return Quantity(self.value + other.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Email(ValueObject):
    """Email address validated syntactically (no DNS lookups).

    Адреса нормалізується бібліотекою email-validator
    (домен в lowercase), тому "Alice@Example.COM" == "Alice@example.com".
    """

    address: str

    def __post_init__(self) -> None:
        if not isinstance(self.address, str):
            raise InvalidEmailError("Invalid email format", address=self.address)
        try:
            validated = validate_email(self.address, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(
                "Invalid email format", address=self.address, reason=str(e)
            ) from e
        object.__setattr__(self, "address", validated.normalized)

    def __str__(self) -> str:
        return self.address
