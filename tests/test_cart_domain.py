"""Tests for the Cart and Product domain objects."""
from __future__ import annotations

from decimal import Decimal

import pytest

from app.core.exceptions import CartIndexError, ValidationException
from app.domain.cart import Cart, Product, to_money


class TestProduct:
    def test_price_is_normalized_to_decimal(self) -> None:
        product = Product(name="Widget", price=9.99)

        assert product.price == Decimal("9.99")
        assert isinstance(product.price, Decimal)

    def test_name_is_stripped(self) -> None:
        assert Product(name="  Gadget ", price="4.50").name == "Gadget"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationException):
            Product(name="   ", price=1)

    @pytest.mark.parametrize("price", ["-1", "abc", "nan", "inf", True, None])
    def test_invalid_price_rejected(self, price) -> None:
        with pytest.raises(ValidationException):
            Product(name="Widget", price=price)

    def test_zero_price_allowed(self) -> None:
        assert Product(name="Freebie", price=0).price == Decimal("0")


class TestCart:
    def test_empty_cart(self) -> None:
        cart = Cart()

        assert cart.count == 0
        assert len(cart) == 0
        assert cart.total_price == Decimal("0")

    def test_total_price_sums_items(self, sample_cart: Cart) -> None:
        assert sample_cart.total_price == Decimal("14.49")

    def test_product_lookup_by_position(self, sample_cart: Cart) -> None:
        assert sample_cart.product(0).name == "Widget"
        assert sample_cart.product(1).name == "Gadget"

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_product_lookup_out_of_range(self, sample_cart: Cart, index: int) -> None:
        with pytest.raises(CartIndexError):
            sample_cart.product(index)

    def test_cart_index_error_is_index_error(self, sample_cart: Cart) -> None:
        with pytest.raises(IndexError):
            sample_cart.remove(5)

    def test_remove_keeps_relative_order(self) -> None:
        cart = Cart([Product(name=name, price=1) for name in ("a", "b", "c", "d")])

        removed = cart.remove(1)

        assert removed.name == "b"
        assert [product.name for product in cart] == ["a", "c", "d"]
        assert cart.count == 3

    def test_remove_negative_index_does_not_wrap(self, sample_cart: Cart) -> None:
        with pytest.raises(CartIndexError):
            sample_cart.remove(-1)
        assert sample_cart.count == 2

    def test_add_appends(self, sample_cart: Cart) -> None:
        sample_cart.add(Product(name="Gizmo", price="1.01"))

        assert sample_cart.count == 3
        assert sample_cart.product(2).name == "Gizmo"
        assert sample_cart.total_price == Decimal("15.50")

    def test_clear(self, sample_cart: Cart) -> None:
        sample_cart.clear()
        assert sample_cart.count == 0

    def test_revision_changes_on_every_mutation(self, sample_cart: Cart) -> None:
        seen = [sample_cart.revision]

        sample_cart.add(Product(name="Gizmo", price=1))
        seen.append(sample_cart.revision)
        sample_cart.remove(0)
        seen.append(sample_cart.revision)
        sample_cart.clear()
        seen.append(sample_cart.revision)

        assert len(set(seen)) == 4

    def test_failed_remove_keeps_revision(self, sample_cart: Cart) -> None:
        before = sample_cart.revision

        with pytest.raises(CartIndexError):
            sample_cart.remove(9)

        assert sample_cart.revision == before

    def test_iteration_is_a_snapshot(self, sample_cart: Cart) -> None:
        names = []
        for product in sample_cart:
            names.append(product.name)
            if product.name == "Widget":
                sample_cart.remove(0)

        assert names == ["Widget", "Gadget"]


def test_to_money_accepts_float_without_binary_noise() -> None:
    assert to_money(4.5) == Decimal("4.5")
    assert str(to_money(9.99)) == "9.99"
