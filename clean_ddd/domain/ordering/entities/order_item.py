"""OrderItem entity і OrderLine snapshot.

OrderItem належить тільки Order aggregate; зовнішній код отримує лише
immutable OrderLine snapshots через `Order.lines`.
"""

from dataclasses import dataclass

from clean_ddd.domain.shared import Entity, Money, Quantity, ValueObject

from ..value_objects import OrderItemId, ProductId


@dataclass(frozen=True)
class OrderLine(ValueObject):
    """Read-only snapshot of one order line."""

    item_id: OrderItemId
    product_id: ProductId
    unit_price: Money
    quantity: Quantity

    @property
    def subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity.value)


class OrderItem(Entity[OrderItemId]):
    """One line of an order: product reference, price, quantity."""

    def __init__(
        self,
        id: OrderItemId,
        product_id: ProductId,
        unit_price: Money,
        quantity: Quantity,
    ) -> None:
        super().__init__(id)
        self._product_id = product_id
        self._unit_price = unit_price
        self._quantity = quantity

    @property
    def product_id(self) -> ProductId:
        return self._product_id

    @property
    def unit_price(self) -> Money:
        return self._unit_price

    @property
    def quantity(self) -> Quantity:
        return self._quantity

    @property
    def subtotal(self) -> Money:
        """unit_price × quantity."""
        return self._unit_price.multiply(self._quantity.value)

    def increase_quantity(self, quantity: Quantity) -> None:
        self._quantity = self._quantity.add(quantity)

    def to_line(self) -> OrderLine:
        return OrderLine(
            item_id=self.id,
            product_id=self._product_id,
            unit_price=self._unit_price,
            quantity=self._quantity,
        )
