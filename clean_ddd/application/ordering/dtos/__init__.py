"""Data Transfer Objects for ordering use cases."""

from .order_dto import OrderDTO, OrderLineDTO

__all__ = ["OrderDTO", "OrderLineDTO"]
