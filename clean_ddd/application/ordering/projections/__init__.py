"""Read-side projections built from order events."""

from .order_summary import OrderSummary, OrderSummaryProjection

__all__ = ["OrderSummary", "OrderSummaryProjection"]
