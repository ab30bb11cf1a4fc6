"""
Catalog Domain Layer
====================

Contains:
- Entities: Product

This layer is framework-agnostic.
"""

from src.catalog.domain.entities import Product

__all__ = [
    "Product",
]
