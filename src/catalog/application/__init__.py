"""
Catalog Application Layer
=========================

Contains:
- Services: orchestration between the HTTP layer and persistence
- DTOs: request/response contracts
"""

from src.catalog.application.dto import (
    AddProductRequest,
    ProductResponse,
)
from src.catalog.application.services import (
    ProductService,
    IProductService,
    IProductDataService,
)

__all__ = [
    # DTOs
    "AddProductRequest",
    "ProductResponse",
    # Services
    "ProductService",
    # Interfaces
    "IProductService",
    "IProductDataService",
]
