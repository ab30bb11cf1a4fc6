"""
Catalog Infrastructure Layer
============================

Contains:
- Models: SQLAlchemy ORM models
- Repositories: data access implementations
"""

from src.catalog.infrastructure.models import ProductModel
from src.catalog.infrastructure.repositories import SQLAlchemyProductDataService

__all__ = [
    "ProductModel",
    "SQLAlchemyProductDataService",
]
