"""Storefront API package."""

from storefront.api.app import create_app
from storefront.api.routes import storefront_router

__all__ = ["create_app", "storefront_router"]
