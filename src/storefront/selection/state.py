"""SelectionState — detail-view and custom-order dialog state for a session."""

import structlog

from storefront.cart.store import CartStore
from storefront.selection.selection import Selection

logger = structlog.get_logger(__name__)


class SelectionState:
    def __init__(self, cart: CartStore):
        self._cart = cart
        self._selection = Selection.create()

    @property
    def selected(self):
        return self._selection.product

    @property
    def custom_order_open(self) -> bool:
        return bool(self._selection.custom_order_open)

    def select_product(self, product) -> None:
        self._selection.select(product)

    def clear_selection(self) -> None:
        self._selection.clear()

    def add_selected_to_cart_and_close(self):
        """Add the product in the detail view to the cart and close the view.

        Both effects happen in this one call. Returns the product that was
        added, or None when nothing was selected.
        """
        product = self._selection.product
        if product is None:
            logger.debug("add_selected_without_selection")
            return None

        self._cart.add_to_cart(product)
        self._selection.clear()
        return product

    def set_custom_order_open(self, is_open: bool) -> None:
        self._selection.set_custom_order_open(is_open)
