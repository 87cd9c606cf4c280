"""Order ORM Models - SQLAlchemy mapping для Order aggregate."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class OrderModel(Base):
    """ORM model для Order aggregate.

    Це ТІЛЬКИ для персистенції - БЕЗ business logic!
    Business logic в domain.ordering.entities.Order.
    """

    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )  # "draft", "confirmed", "shipped", "delivered", "cancelled"

    # ShippingAddress value object (recipient, street, city, postal_code, country)
    shipping_address: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON, nullable=True
    )
    tracking_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    cancellation_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, index=True)

    # Optimistic locking: UPDATE ... WHERE version = <loaded version>
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    items: Mapped[list["OrderItemModel"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
        lazy="selectin",
    )

    __mapper_args__ = {
        "version_id_col": version,
        "version_id_generator": False,  # version задає aggregate
    }

    def __repr__(self) -> str:
        return (
            f"<OrderModel(id={self.id}, customer_id={self.customer_id}, "
            f"status={self.status}, version={self.version})>"
        )


class OrderItemModel(Base):
    """Рядок order. Належить OrderModel (delete-orphan)."""

    __tablename__ = "order_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    order_id: Mapped[str] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[str] = mapped_column(String(64), nullable=False)

    # Точний decimal як текст (SQLite не має native DECIMAL)
    unit_price: Mapped[str] = mapped_column(String(40), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[OrderModel] = relationship(back_populates="items")

    __table_args__ = (Index("ix_order_items_order_position", "order_id", "position"),)
