"""Cart aggregate — the visitor's working collection of catalogue products.

The cart lives for the length of a session only and is never persisted.
Lines are keyed by product id and kept in the order they were first added;
a line whose quantity would drop to zero or below is removed instead.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import HasMany, Integer, String, Text

from storefront.cart.events import CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.domain import storefront


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Integer(required=True)
    name = String(required=True, max_length=255, sanitize=False)
    price = Integer(required=True, min_value=1)
    image = String(max_length=500, sanitize=False)
    description = Text(sanitize=False)
    category = String(max_length=100, sanitize=False)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.price * self.quantity


@storefront.aggregate
class Cart:
    items = HasMany(CartItem)

    @invariant.post
    def one_line_per_product(self):
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A cart holds at most one line per product"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls):
        return cls()

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def total_price(self):
        return sum(item.price * item.quantity for item in self.items)

    @property
    def cart_count(self):
        return sum(item.quantity for item in self.items)

    def item_for(self, product_id):
        return next((i for i in self.items if i.product_id == product_id), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_product(self, product):
        """Add one unit of a product, merging into its existing line."""
        existing = self.item_for(product.product_id)

        if existing:
            existing.quantity += 1
            quantity = existing.quantity
        else:
            self.add_items(
                CartItem(
                    product_id=product.product_id,
                    name=product.name,
                    price=product.price,
                    image=product.image,
                    description=product.description,
                    category=product.category,
                    quantity=1,
                )
            )
            quantity = 1

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=product.product_id,
                quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        """Remove the line for a product. Returns False when there was none."""
        item = self.item_for(product_id)
        if item is None:
            return False

        self.remove_items(item)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=product_id,
            )
        )
        return True

    def update_quantity(self, product_id, quantity):
        """Set a line's quantity; zero or less removes the line.

        Returns False when the cart is left unchanged.
        """
        if quantity <= 0:
            return self.remove_item(product_id)

        item = self.item_for(product_id)
        if item is None or item.quantity == quantity:
            return False

        previous_quantity = item.quantity
        item.quantity = quantity

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=product_id,
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return True
