"""CartStore — owns the session cart and exposes the cart operations.

Wraps a single Cart aggregate. Each operation runs to completion before it
returns, so totals read afterwards always reflect a settled cart. Events the
aggregate raises are drained into the log once the mutation is done.
"""

from dataclasses import dataclass

import structlog

from storefront.cart.cart import Cart
from storefront.notifier.port import NotifierPort

logger = structlog.get_logger(__name__)

ITEM_ADDED_MESSAGE = "Товар добавлен в корзину"


@dataclass(frozen=True)
class CartLine:
    """Read-only copy of a cart line handed to the render boundary."""

    product_id: int
    name: str
    price: int
    image: str | None
    description: str | None
    category: str | None
    quantity: int

    @property
    def line_total(self) -> int:
        return self.price * self.quantity

    @classmethod
    def from_item(cls, item) -> "CartLine":
        return cls(
            product_id=item.product_id,
            name=item.name,
            price=item.price,
            image=item.image,
            description=item.description,
            category=item.category,
            quantity=item.quantity,
        )


class CartStore:
    def __init__(self, notifier: NotifierPort):
        self._notifier = notifier
        self._cart = Cart.create()

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def cart_id(self) -> str:
        return str(self._cart.id)

    @property
    def items(self) -> tuple[CartLine, ...]:
        return tuple(CartLine.from_item(item) for item in self._cart.items)

    @property
    def total_price(self) -> int:
        return self._cart.total_price

    @property
    def cart_count(self) -> int:
        return self._cart.cart_count

    @property
    def is_empty(self) -> bool:
        return not self._cart.items

    def quantity_of(self, product_id) -> int:
        item = self._cart.item_for(product_id)
        return item.quantity if item else 0

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_to_cart(self, product) -> None:
        self._cart.add_product(product)
        self._settle()
        self._notifier.notify(ITEM_ADDED_MESSAGE)

    def remove_from_cart(self, product_id) -> None:
        # Unknown ids are a no-op
        self._cart.remove_item(product_id)
        self._settle()

    def update_quantity(self, product_id, quantity: int) -> None:
        self._cart.update_quantity(product_id, quantity)
        self._settle()

    def increment(self, product_id) -> None:
        current = self.quantity_of(product_id)
        if current:
            self.update_quantity(product_id, current + 1)

    def decrement(self, product_id) -> None:
        current = self.quantity_of(product_id)
        if current:
            self.update_quantity(product_id, current - 1)

    def _settle(self) -> None:
        for event in self._cart._events:
            payload = {key: value for key, value in event.to_dict().items() if not key.startswith("_")}
            logger.debug("cart_event", event_type=event.__class__.__name__, **payload)
        self._cart._events.clear()
