"""
Catalog Interfaces Layer
========================

Interface adapters (controllers) for the catalog module.

This is the outermost layer - handles HTTP requests/responses and
delegates to application services.
"""

from src.catalog.interfaces.controllers import catalog_router, get_product_service

__all__ = ["catalog_router", "get_product_service"]
