"""Ordering queries (read operations)."""

from .get_order import GetOrderQuery, GetOrderSummaryQuery

__all__ = ["GetOrderQuery", "GetOrderSummaryQuery"]
