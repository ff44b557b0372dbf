"""Product value object — one row of the fixed storefront catalogue."""

from protean.fields import Integer, String, Text

from storefront.domain import storefront


@storefront.value_object
class Product:
    """A purchasable handmade item.

    Products are created once, when the catalogue table is loaded, and are
    never modified afterwards. Prices are whole roubles.
    """

    product_id: Integer(required=True, min_value=1)
    name: String(required=True, max_length=255, sanitize=False)
    price: Integer(required=True, min_value=1)
    image: String(max_length=500, sanitize=False)
    description: Text(sanitize=False)
    category: String(required=True, max_length=100, sanitize=False)
