"""Base Command class для CQRS pattern.

Command - запит на зміну стану системи (write operation).
Commands мають side effects (змінюють дані).
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Command(ABC):
    """Base class для всіх commands.

    Command характеристики:
    - **Immutable**: frozen=True запобігає змінам
    - **Intent**: Чітко виражає намір (ConfirmOrderCommand, CompleteTaskCommand)
    - **Verb-based naming**: ConfirmOrder, ShipOrder (не Order)
    - **No business logic**: Тільки data (primitives), logic в aggregate

    Example:
        >>> @dataclass(frozen=True)
        ... class ShipOrderCommand(Command):
        ...     order_id: str
        ...     tracking_number: str

        >>> command = ShipOrderCommand(order_id="o-1", tracking_number="TRK-1")
        >>> result = await handler.handle(command)
    """

    pass
