"""Tests для Entity identity та typed identifiers."""

from decimal import Decimal

import pytest

from clean_ddd.domain.ordering import (
    OrderId,
    OrderItem,
    OrderItemId,
    ProductId,
)
from clean_ddd.domain.shared import Money, Quantity, UserId, ValidationError


def _item(item_id: str, quantity: int) -> OrderItem:
    return OrderItem(
        id=OrderItemId(item_id),
        product_id=ProductId("p-1"),
        unit_price=Money(Decimal("1"), "USD"),
        quantity=Quantity(quantity),
    )


class TestEntityIdentity:
    def test_same_id_means_same_entity(self):
        """Test: різні атрибути, той самий ID → equal."""
        assert _item("i-1", 1) == _item("i-1", 5)

    def test_different_id_means_different_entity(self):
        assert _item("i-1", 1) != _item("i-2", 1)

    def test_hash_follows_identity(self):
        assert len({_item("i-1", 1), _item("i-1", 3)}) == 1

    def test_requires_typed_identifier(self):
        with pytest.raises(TypeError):
            OrderItem(
                id="i-1",  # type: ignore[arg-type]
                product_id=ProductId("p-1"),
                unit_price=Money(Decimal("1"), "USD"),
                quantity=Quantity(1),
            )


class TestIdentifiers:
    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            OrderId("")

    def test_whitespace_id_rejected(self):
        with pytest.raises(ValidationError):
            UserId("   ")

    def test_generate_is_unique(self):
        assert OrderId.generate() != OrderId.generate()

    def test_ids_of_different_types_are_not_equal(self):
        assert OrderId("x") != UserId("x")
