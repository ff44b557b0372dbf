"""Selection aggregate — what the visitor is currently looking at.

Two independent components: the product open in the detail view (if any)
and whether the custom-order dialog is showing. Neither depends on the cart.
"""

from protean.fields import Boolean, ValueObject

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.aggregate
class Selection:
    product = ValueObject(Product)
    custom_order_open = Boolean(default=False)

    @classmethod
    def create(cls):
        return cls(custom_order_open=False)

    def select(self, product):
        self.product = product

    def clear(self):
        self.product = None

    def set_custom_order_open(self, is_open):
        self.custom_order_open = bool(is_open)
