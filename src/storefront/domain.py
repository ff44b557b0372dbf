"""Storefront bounded context — Catalogue, Shopping Cart and Custom Orders.

Holds the fixed handmade-goods catalogue, the visitor's cart (CQRS aggregate,
never persisted), the product/custom-order selection state and the stub
intake for custom-order requests.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
