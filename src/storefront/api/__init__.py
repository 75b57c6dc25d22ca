"""Storefront API package."""

from storefront.api.errors import install_error_handlers
from storefront.api.routes import category_router, order_router, product_router, user_router

__all__ = ["user_router", "category_router", "product_router", "order_router", "install_error_handlers"]
