"""Tests for the Storefront application context and its snapshots."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.application import Storefront, StorefrontSnapshot
from storefront.cart.store import ITEM_ADDED_MESSAGE
from storefront.catalogue.catalogue import ProductCatalog
from storefront.intake.intake import ACKNOWLEDGEMENT_MESSAGE
from storefront.notifier.memory import InMemoryNotifier


@pytest.fixture()
def shop(notifier):
    return Storefront(notifier=notifier)


def _cart(snapshot):
    return [(line.product_id, line.quantity) for line in snapshot.cart]


class TestInitialSnapshot:
    def test_catalogue(self, shop):
        snapshot = shop.snapshot()
        assert [p.product_id for p in snapshot.products] == [1, 2, 3, 4, 5, 6]

    def test_everything_else_empty(self, shop):
        snapshot = shop.snapshot()
        assert snapshot.cart == ()
        assert snapshot.total_price == 0
        assert snapshot.cart_count == 0
        assert snapshot.selected is None
        assert snapshot.custom_order_open is False
        assert snapshot.form.is_empty

    def test_snapshot_is_frozen(self, shop):
        with pytest.raises(AttributeError):
            shop.snapshot().cart_count = 5


class TestCartScenario:
    def test_add_merge_then_zero(self, shop):
        shop.add_to_cart(1)
        snapshot = shop.snapshot()
        assert _cart(snapshot) == [(1, 1)]
        assert snapshot.total_price == 4500

        shop.add_to_cart(1)
        snapshot = shop.snapshot()
        assert _cart(snapshot) == [(1, 2)]
        assert snapshot.total_price == 9000

        shop.update_quantity(1, 0)
        assert _cart(shop.snapshot()) == []

    def test_snapshot_does_not_follow_later_mutations(self, shop):
        shop.add_to_cart(1)
        before = shop.snapshot()
        shop.add_to_cart(2)
        assert _cart(before) == [(1, 1)]
        assert before.cart_count == 1

    def test_unknown_product_rejected(self, shop, notifier):
        with pytest.raises(ObjectNotFoundError):
            shop.add_to_cart(99)
        assert shop.snapshot().cart == ()
        assert notifier.messages == []

    def test_remove(self, shop):
        shop.add_to_cart(1)
        shop.remove_from_cart(1)
        shop.remove_from_cart(1)
        assert shop.snapshot().cart == ()


class TestSelectionScenario:
    def test_select_and_clear(self, shop, macrame):
        shop.select_product(2)
        assert shop.snapshot().selected == macrame
        shop.clear_selection()
        assert shop.snapshot().selected is None

    def test_add_selected_and_close(self, shop, notifier):
        shop.select_product(3)
        shop.add_selected_to_cart_and_close()

        snapshot = shop.snapshot()
        assert _cart(snapshot) == [(3, 1)]
        assert snapshot.selected is None
        assert notifier.messages == [ITEM_ADDED_MESSAGE]

    def test_select_unknown_product(self, shop):
        with pytest.raises(ObjectNotFoundError):
            shop.select_product(99)


class TestCustomOrderScenario:
    def test_submit(self, shop, notifier):
        shop.open_custom_order()
        shop.edit_custom_order(name="A", email="a@b.c", message="hi")

        reference = shop.submit_custom_order()

        snapshot = shop.snapshot()
        assert reference
        assert (snapshot.form.name, snapshot.form.email, snapshot.form.message) == ("", "", "")
        assert snapshot.custom_order_open is False
        assert notifier.messages == [ACKNOWLEDGEMENT_MESSAGE]

    def test_incomplete_form_is_rejected_and_kept(self, shop, notifier):
        shop.open_custom_order()
        shop.edit_custom_order(name="A", message="hi")

        with pytest.raises(ValidationError) as exc:
            shop.submit_custom_order()

        assert "email" in exc.value.messages
        snapshot = shop.snapshot()
        assert snapshot.form.name == "A"
        assert snapshot.custom_order_open is True
        assert notifier.messages == []

    def test_submit_with_dialog_closed_does_nothing(self, shop, notifier):
        shop.edit_custom_order(name="A", email="a@b.c", message="hi")

        assert shop.submit_custom_order() is None

        snapshot = shop.snapshot()
        assert notifier.messages == []
        assert snapshot.custom_order_open is False
        assert (snapshot.form.name, snapshot.form.email, snapshot.form.message) == ("A", "a@b.c", "hi")

    def test_submit_after_cancel_does_nothing(self, shop, notifier):
        shop.open_custom_order()
        shop.edit_custom_order(name="A", email="a@b.c", message="hi")
        shop.close_custom_order()

        assert shop.submit_custom_order() is None
        assert notifier.messages == []

    def test_close_discards_draft(self, shop):
        shop.open_custom_order()
        shop.edit_custom_order(name="A")
        shop.close_custom_order()

        snapshot = shop.snapshot()
        assert snapshot.custom_order_open is False
        assert snapshot.form.is_empty


class TestConstruction:
    def test_default_notifier_comes_from_registry(self, monkeypatch):
        from storefront.notifier import get_notifier, reset_notifiers
        from storefront.notifier.memory import InMemoryNotifier

        reset_notifiers()
        monkeypatch.setenv("STOREFRONT_NOTIFIER", "memory")
        shop = Storefront()
        assert isinstance(shop.notifier, InMemoryNotifier)
        assert shop.notifier is get_notifier()
        reset_notifiers()

    def test_snapshot_type(self, shop):
        assert isinstance(shop.snapshot(), StorefrontSnapshot)

    def test_empty_catalogue_is_used_as_given(self):
        shop = Storefront(notifier=InMemoryNotifier(), catalogue=ProductCatalog(()))
        assert shop.snapshot().products == ()
        with pytest.raises(ObjectNotFoundError):
            shop.add_to_cart(1)

    def test_custom_catalogue_resolves_ids(self):
        catalogue = ProductCatalog(
            [{"product_id": 7, "name": "Плед", "price": 5100, "category": "Текстиль"}]
        )
        shop = Storefront(notifier=InMemoryNotifier(), catalogue=catalogue)

        shop.add_to_cart(7)
        assert _cart(shop.snapshot()) == [(7, 1)]
        assert shop.snapshot().total_price == 5100
        with pytest.raises(ObjectNotFoundError):
            shop.select_product(1)

    def test_given_notifier_is_kept(self):
        notifier = InMemoryNotifier()
        assert Storefront(notifier=notifier).notifier is notifier
