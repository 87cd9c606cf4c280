from .order import Order
from .order_item import OrderItem, OrderLine

__all__ = ["Order", "OrderItem", "OrderLine"]
