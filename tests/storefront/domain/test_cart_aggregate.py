"""Tests for Cart aggregate creation, derived totals and invariants."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.cart import Cart, CartItem


class TestCartCreation:
    def test_create_starts_with_empty_items(self):
        cart = Cart.create()
        assert len(cart.items) == 0

    def test_create_generates_id(self):
        cart = Cart.create()
        assert cart.id is not None

    def test_empty_cart_totals(self):
        cart = Cart.create()
        assert cart.total_price == 0
        assert cart.cart_count == 0


class TestCartTotals:
    def test_total_price_and_count(self, panel, macrame):
        cart = Cart.create()
        cart.add_product(panel)
        cart.add_product(macrame)
        cart.add_product(macrame)

        assert cart.total_price == 10100
        assert cart.cart_count == 3

    def test_totals_follow_quantity_updates(self, panel):
        cart = Cart.create()
        cart.add_product(panel)
        cart.update_quantity(panel.product_id, 4)

        assert cart.total_price == 18000
        assert cart.cart_count == 4

    def test_totals_after_removal(self, panel, vase):
        cart = Cart.create()
        cart.add_product(panel)
        cart.add_product(vase)
        cart.remove_item(panel.product_id)

        assert cart.total_price == 3200
        assert cart.cart_count == 1


class TestCartItemEntity:
    def test_line_total(self):
        item = CartItem(product_id=1, name="Панно", price=4500, category="Текстиль", quantity=2)
        assert item.line_total == 9000

    def test_quantity_below_one_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            CartItem(product_id=1, name="Панно", price=4500, category="Текстиль", quantity=0)
        assert "quantity" in exc.value.messages

    def test_quantity_cannot_be_set_to_zero(self, panel):
        cart = Cart.create()
        cart.add_product(panel)
        with pytest.raises(ValidationError):
            cart.items[0].quantity = 0

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            CartItem(product_id=1, name="Панно", price=0, category="Текстиль", quantity=1)
