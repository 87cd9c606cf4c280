"""Order Mapper - converts between Order aggregate and OrderModel ORM."""

from decimal import Decimal
from typing import Any, Optional

from clean_ddd.domain.ordering import (
    CustomerId,
    Order,
    OrderId,
    OrderItem,
    OrderItemId,
    OrderStatus,
    ProductId,
    ShippingAddress,
)
from clean_ddd.domain.shared import Money, Quantity
from clean_ddd.infrastructure.persistence.sqlalchemy.models import (
    OrderItemModel,
    OrderModel,
)


class OrderMapper:
    """Mapper для Order aggregate ↔ OrderModel ORM.

    Responsibilities:
    - Convert domain Order → ORM OrderModel + OrderItemModel rows (to_model)
    - Convert ORM OrderModel → domain Order через reconstitute (to_entity)
    - Sync рядків order при UPDATE (update_model_from_entity)

    Example:
        >>> mapper = OrderMapper()
        >>> model = mapper.to_model(order)  # Domain → ORM
        >>> order_back = mapper.to_entity(model)  # ORM → Domain
    """

    def to_entity(self, model: OrderModel) -> Order:
        """Convert ORM OrderModel → Domain Order (буфер подій порожній)."""
        address = model.shipping_address
        return Order.reconstitute(
            id=OrderId(model.id),
            customer_id=CustomerId(model.customer_id),
            currency=model.currency,
            status=OrderStatus(model.status),
            items=[
                OrderItem(
                    id=OrderItemId(item.id),
                    product_id=ProductId(item.product_id),
                    unit_price=Money(Decimal(item.unit_price), item.currency),
                    quantity=Quantity(item.quantity),
                )
                for item in sorted(model.items, key=lambda i: i.position)
            ],
            shipping_address=ShippingAddress(**address) if address else None,
            tracking_number=model.tracking_number,
            cancellation_reason=model.cancellation_reason,
            created_at=model.created_at,
            version=model.version,
        )

    def to_model(self, entity: Order) -> OrderModel:
        """Convert Domain Order → new OrderModel (INSERT).

        Version рядка = version aggregate після save.
        """
        return OrderModel(
            id=str(entity.id),
            customer_id=str(entity.customer_id),
            currency=entity.currency,
            status=entity.status.value,  # Enum → string
            shipping_address=_address_to_dict(entity.shipping_address),
            tracking_number=entity.tracking_number,
            cancellation_reason=entity.cancellation_reason,
            created_at=entity.created_at,
            version=entity.version + 1,
            items=[
                self._item_to_model(item, position)
                for position, item in enumerate(entity.items())
            ],
        )

    def update_model_from_entity(self, model: OrderModel, entity: Order) -> OrderModel:
        """Update існуючого OrderModel з domain Order.

        Note:
            Рядки синхронізуються за id: змінені оновлюються, видалені
            прибираються (delete-orphan), нові додаються.
        """
        model.customer_id = str(entity.customer_id)
        model.currency = entity.currency
        model.status = entity.status.value
        model.shipping_address = _address_to_dict(entity.shipping_address)
        model.tracking_number = entity.tracking_number
        model.cancellation_reason = entity.cancellation_reason

        existing = {item.id: item for item in model.items}
        synced: list[OrderItemModel] = []
        for position, item in enumerate(entity.items()):
            row = existing.get(str(item.id))
            if row is None:
                row = self._item_to_model(item, position)
            else:
                row.position = position
                row.product_id = str(item.product_id)
                row.unit_price = str(item.unit_price.amount)
                row.currency = item.unit_price.currency
                row.quantity = item.quantity.value
            synced.append(row)
        model.items = synced

        # Increment version (optimistic locking)
        model.version = entity.version + 1

        return model

    def _item_to_model(self, item: OrderItem, position: int) -> OrderItemModel:
        return OrderItemModel(
            id=str(item.id),
            position=position,
            product_id=str(item.product_id),
            unit_price=str(item.unit_price.amount),
            currency=item.unit_price.currency,
            quantity=item.quantity.value,
        )


def _address_to_dict(address: Optional[ShippingAddress]) -> Optional[dict[str, Any]]:
    if address is None:
        return None
    return {
        "recipient": address.recipient,
        "street": address.street,
        "city": address.city,
        "postal_code": address.postal_code,
        "country": address.country,
    }
