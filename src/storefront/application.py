"""Storefront application context.

One ``Storefront`` owns one of each store for a visitor session and is the
only thing the render boundary talks to: it forwards user intents into the
stores and hands back immutable snapshots of settled state.
"""

from dataclasses import dataclass

from storefront.cart.store import CartLine, CartStore
from storefront.catalogue.catalogue import CATALOGUE, ProductCatalog
from storefront.intake.form import CustomOrderForm, CustomOrderRequest
from storefront.intake.intake import OrderIntake
from storefront.notifier import get_notifier
from storefront.notifier.port import NotifierPort
from storefront.selection.state import SelectionState


@dataclass(frozen=True)
class StorefrontSnapshot:
    """Everything the render boundary needs, copied out of the stores."""

    products: tuple
    cart: tuple[CartLine, ...]
    total_price: int
    cart_count: int
    selected: object | None
    custom_order_open: bool
    form: CustomOrderForm


class Storefront:
    def __init__(self, notifier: NotifierPort | None = None, catalogue: ProductCatalog | None = None):
        self.notifier = get_notifier() if notifier is None else notifier
        self.catalogue = CATALOGUE if catalogue is None else catalogue
        self.cart = CartStore(self.notifier)
        self.selection = SelectionState(self.cart)
        self.intake = OrderIntake(self.notifier, self.selection)

    # -------------------------------------------------------------------
    # Cart intents
    # -------------------------------------------------------------------
    def add_to_cart(self, product_id) -> None:
        self.cart.add_to_cart(self.catalogue.require(product_id))

    def remove_from_cart(self, product_id) -> None:
        self.cart.remove_from_cart(product_id)

    def update_quantity(self, product_id, quantity: int) -> None:
        self.cart.update_quantity(product_id, quantity)

    # -------------------------------------------------------------------
    # Selection intents
    # -------------------------------------------------------------------
    def select_product(self, product_id) -> None:
        self.selection.select_product(self.catalogue.require(product_id))

    def clear_selection(self) -> None:
        self.selection.clear_selection()

    def add_selected_to_cart_and_close(self):
        return self.selection.add_selected_to_cart_and_close()

    # -------------------------------------------------------------------
    # Custom order intents
    # -------------------------------------------------------------------
    def open_custom_order(self) -> None:
        self.selection.set_custom_order_open(True)

    def close_custom_order(self) -> None:
        self.intake.cancel()

    def edit_custom_order(self, **fields) -> CustomOrderForm:
        return self.intake.edit(**fields)

    def submit_custom_order(self) -> str | None:
        """Check the current form and pass it to the intake.

        The form only exists inside the open dialog: with the dialog closed
        nothing is submitted and None is returned. Raises ValidationError
        when any field is empty; the form and the dialog are left untouched
        in that case.
        """
        if not self.selection.custom_order_open:
            return None

        request = CustomOrderRequest.from_form(self.intake.form)
        return self.intake.submit(request)

    # -------------------------------------------------------------------
    # Render boundary
    # -------------------------------------------------------------------
    def snapshot(self) -> StorefrontSnapshot:
        return StorefrontSnapshot(
            products=self.catalogue.products(),
            cart=self.cart.items,
            total_price=self.cart.total_price,
            cart_count=self.cart.cart_count,
            selected=self.selection.selected,
            custom_order_open=self.selection.custom_order_open,
            form=self.intake.form,
        )
