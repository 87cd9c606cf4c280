"""Enums для Ordering bounded context."""

from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle status.

    State machine:
        DRAFT → CONFIRMED → SHIPPED → DELIVERED
        DRAFT → CANCELLED
        CONFIRMED → CANCELLED

    Terminal: DELIVERED, CANCELLED.
    """

    DRAFT = "draft"
    """Order створений, можна додавати/видаляти items."""

    CONFIRMED = "confirmed"
    """Клієнт підтвердив order, total зафіксований."""

    SHIPPED = "shipped"
    """Order відправлений, є tracking number."""

    DELIVERED = "delivered"
    """Order доставлений (terminal)."""

    CANCELLED = "cancelled"
    """Order скасований (terminal)."""

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @property
    def accepts_item_changes(self) -> bool:
        """Items можна змінювати поки order не відправлений/скасований."""
        return self not in (
            OrderStatus.CANCELLED,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        )
