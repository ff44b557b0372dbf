"""The storefront catalogue — a static, read-only table of Products.

The table is loaded once at import time into ``CATALOGUE``; every other part
of the storefront only reads from it.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalogue.product import Product

logger = structlog.get_logger(__name__)

_IMAGE_CDN = "https://cdn.poehali.dev/projects/3a2a3f86-0019-4b98-b0ef-1c33f60912bd/files"

PRODUCT_TABLE: tuple[dict, ...] = (
    {
        "product_id": 1,
        "name": "Текстильное панно",
        "price": 4500,
        "image": f"{_IMAGE_CDN}/15e3e2eb-4d29-435e-8229-f910e4805547.jpg",
        "description": "Ручное плетение с геометрическим узором. Натуральные материалы, размер 60x80 см",
        "category": "Текстиль",
    },
    {
        "product_id": 2,
        "name": "Макраме для растений",
        "price": 2800,
        "image": f"{_IMAGE_CDN}/59539003-7a96-482c-a254-b5760992114d.jpg",
        "description": "Подвесное кашпо из хлопкового шнура с деревянными бусинами",
        "category": "Декор",
    },
    {
        "product_id": 3,
        "name": "Керамическая ваза",
        "price": 3200,
        "image": "https://images.unsplash.com/photo-1578500494198-246f612d3b3d?w=600&h=800&fit=crop",
        "description": "Авторская керамика ручной работы, глазурь молочного оттенка",
        "category": "Керамика",
    },
    {
        "product_id": 4,
        "name": "Плетеная корзина",
        "price": 2200,
        "image": "https://images.unsplash.com/photo-1585933646077-f4664357e8b8?w=600&h=800&fit=crop",
        "description": "Корзина из ротанга, идеальна для хранения и декора",
        "category": "Декор",
    },
    {
        "product_id": 5,
        "name": "Льняная скатерть",
        "price": 3800,
        "image": "https://images.unsplash.com/photo-1522771739844-6a9f6d5f14af?w=600&h=800&fit=crop",
        "description": "Натуральный лен с ручной вышивкой, 140x200 см",
        "category": "Текстиль",
    },
    {
        "product_id": 6,
        "name": "Глиняная тарелка",
        "price": 1800,
        "image": "https://images.unsplash.com/photo-1610701596007-11502861dcfa?w=600&h=800&fit=crop",
        "description": "Авторская керамика с органичным узором, диаметр 25 см",
        "category": "Керамика",
    },
)


class ProductCatalog:
    """Immutable, ordered collection of Products keyed by product id."""

    def __init__(self, rows):
        products: dict[int, Product] = {}
        for row in rows:
            product = Product(**row)
            if product.product_id in products:
                raise ValidationError({"product_id": [f"Duplicate product id {product.product_id} in catalogue"]})
            products[product.product_id] = product

        self._products: Mapping[int, Product] = MappingProxyType(products)
        logger.debug("catalogue_loaded", product_count=len(products))

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id) -> bool:
        return product_id in self._products

    def products(self) -> tuple[Product, ...]:
        return tuple(self._products.values())

    def get(self, product_id) -> Product | None:
        return self._products.get(product_id)

    def require(self, product_id) -> Product:
        """Return the product, or raise when the id is not in the catalogue."""
        product = self._products.get(product_id)
        if product is None:
            raise ObjectNotFoundError(f"Product {product_id} is not in the catalogue")
        return product

    def categories(self) -> tuple[str, ...]:
        """Distinct categories in order of first appearance."""
        return tuple(dict.fromkeys(product.category for product in self._products.values()))

    def by_category(self, category: str) -> tuple[Product, ...]:
        return tuple(product for product in self._products.values() if product.category == category)


CATALOGUE = ProductCatalog(PRODUCT_TABLE)
