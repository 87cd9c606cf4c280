"""Domain Layer - Pure Business Logic.

This layer contains:
- Bounded Contexts (Ordering, Users, Tasks)
- Aggregate Roots (Order, User, Task)
- Value Objects (Money, Quantity, Email, typed IDs)
- Domain Events (closed union per aggregate)
- Repository Interfaces (ports)

Key Principles:
- Zero dependencies on infrastructure
- Synchronous: no I/O, no awaits, no logging
- Rich domain models (not anemic)
- Cross-aggregate references by ID only

Bounded Contexts:
- ordering: Order lifecycle (draft → confirmed → shipped → delivered)
- users: User registration and profile
- tasks: Per-user todo tasks
- shared: Common base classes
"""

# Shared kernel
from .shared import AggregateRoot, DomainEvent, DomainException

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "DomainException",
]
