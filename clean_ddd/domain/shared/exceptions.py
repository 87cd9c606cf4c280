"""Base domain exceptions.

Domain exceptions представляють порушення бізнес-правил.
Вони частина domain layer і не залежать від infrastructure.

Taxonomy:
    ValidationError        - value object / attribute rule violated
    BusinessRuleViolation  - aggregate invariant violated
    InvalidStateTransition - operation not allowed in current status
    EntityNotFound         - child entity missing inside an aggregate
    AggregateNotFound      - repository returned nothing for an id
    AggregateAlreadyExists - unique constraint violated on save
    ConcurrencyException   - optimistic locking failed on save
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors.

    Domain exceptions - це business rule violations, не technical errors.

    Example:
        >>> raise DomainException("Order cannot be confirmed", order_id="o-1")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (order_id, status, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context.

        Returns:
            Error message with context if available.
        """
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ValidationError(DomainException, ValueError):
    """Raised коли value object або атрибут порушує правило валідації.

    Також є ValueError, щоб код який ловить ValueError продовжував працювати.

    Example:
        >>> Money(Decimal("-1"), "USD")  # ValidationError
    """

    pass


class InvalidQuantityError(ValidationError):
    """Raised коли кількість <= 0."""

    pass


class InvalidEmailError(ValidationError):
    """Raised коли email не відповідає граматиці адреси."""

    pass


class CurrencyMismatchError(ValidationError):
    """Raised при арифметиці над Money з різними валютами."""

    pass


class BusinessRuleViolation(DomainException):
    """Exception raised when business rule is violated.

    Example:
        >>> if not self._items:
        ...     raise BusinessRuleViolation(
        ...         "Cannot confirm order without items",
        ...         order_id=str(self.id),
        ...     )
    """

    pass


class InvalidStateTransition(BusinessRuleViolation):
    """Exception raised for invalid state transitions.

    Example:
        >>> # Order SHIPPED -> CANCELLED is invalid
        >>> raise InvalidStateTransition(
        ...     "Cannot cancel order: invalid status",
        ...     current_status=OrderStatus.SHIPPED.value,
        ... )
    """

    pass


class EntityNotFound(DomainException):
    """Raised коли aggregate не містить потрібної child entity."""

    pass


class AggregateNotFound(DomainException):
    """Exception raised when aggregate is not found.

    Example:
        >>> order = await uow.orders.get_by_id(order_id)
        >>> if order is None:
        ...     raise AggregateNotFound("Order not found", order_id=str(order_id))
    """

    pass


class AggregateAlreadyExists(DomainException):
    """Raised коли persistence виявила дублікат (id або unique поле)."""

    pass


class ConcurrencyException(DomainException):
    """Exception raised when optimistic locking fails.

    Raised by persistence layer, не aggregate. Caller має перезавантажити
    aggregate і повторити операцію.

    Example:
        >>> if stored_version != order.version:
        ...     raise ConcurrencyException(
        ...         "Order was modified by another transaction",
        ...         order_id=str(order.id),
        ...         expected_version=order.version,
        ...         actual_version=stored_version,
        ...     )
    """

    pass
