"""Shared Kernel - base building blocks для всієї domain layer.

Shared Kernel містить building blocks для Domain-Driven Design:
- Entity: Об'єкт з identity
- ValueObject: Immutable об'єкт порівнюваний за значенням
- Identifier: Typed ID (UserId, OrderId, ...)
- PendingEvents / AggregateRoot: буфер подій і контракт aggregate root
- DomainEvent: Подія що сталась в domain
- Money, Quantity, Email: спільні value objects
- DomainException: Порушення бізнес-правил
"""

from .aggregate_root import AggregateRoot, PendingEvents
from .domain_event import DomainEvent
from .entity import Entity
from .exceptions import (
    AggregateAlreadyExists,
    AggregateNotFound,
    BusinessRuleViolation,
    ConcurrencyException,
    CurrencyMismatchError,
    DomainException,
    EntityNotFound,
    InvalidEmailError,
    InvalidQuantityError,
    InvalidStateTransition,
    ValidationError,
)
from .identifiers import Identifier, UserId
from .value_object import ValueObject, validate_value_object
from .values import Email, Money, Quantity

__all__ = [
    # Base classes
    "Entity",
    "ValueObject",
    "Identifier",
    "PendingEvents",
    "AggregateRoot",
    "DomainEvent",
    # Shared values
    "UserId",
    "Money",
    "Quantity",
    "Email",
    # Utilities
    "validate_value_object",
    # Exceptions
    "DomainException",
    "ValidationError",
    "InvalidQuantityError",
    "InvalidEmailError",
    "CurrencyMismatchError",
    "BusinessRuleViolation",
    "InvalidStateTransition",
    "EntityNotFound",
    "AggregateNotFound",
    "AggregateAlreadyExists",
    "ConcurrencyException",
]
