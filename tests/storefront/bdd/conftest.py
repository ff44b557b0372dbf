"""Shared BDD fixtures and step definitions for the Storefront."""

import pytest
from pytest_bdd import given, parsers, then
from storefront.application import Storefront
from storefront.notifier.memory import InMemoryNotifier


@pytest.fixture()
def error():
    """Outcome of the last submission: its reference or the validation error."""
    return {"exc": None, "reference": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty storefront", target_fixture="shop")
def empty_storefront():
    return Storefront(notifier=InMemoryNotifier())


@given(parsers.cfparse("product {product_id:d} is in the cart"))
def product_in_cart(shop, product_id):
    shop.add_to_cart(product_id)
    shop.notifier.reset()


@given("the custom-order dialog is open")
def custom_order_dialog_open(shop):
    shop.open_custom_order()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart holds product {product_id:d} with quantity {quantity:d}"))
def cart_holds_product(shop, product_id, quantity):
    lines = {line.product_id: line.quantity for line in shop.snapshot().cart}
    assert lines.get(product_id) == quantity


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total_is(shop, total):
    assert shop.snapshot().total_price == total


@then(parsers.cfparse('the visitor was told "{message}"'))
def visitor_was_told(shop, message):
    assert message in shop.notifier.messages


@then("no product is selected")
def no_product_selected(shop):
    assert shop.snapshot().selected is None


@then("the custom-order dialog is open")
def custom_order_dialog_is_open(shop):
    assert shop.snapshot().custom_order_open is True
