"""
Catalog Application Services
============================

Application service for the product catalog.

Maps request DTOs to entities, delegates persistence to the data service and
maps the stored entities back to response DTOs.
"""

from typing import List
from abc import ABC, abstractmethod

from src.catalog.domain import Product
from src.catalog.application.dto import AddProductRequest, ProductResponse


# ========== Data Service Interface ==========

class IProductDataService(ABC):
    """Interface for product persistence."""

    @abstractmethod
    async def add_product(self, product: Product) -> Product:
        """Insert a product and return it with its generated id."""

    @abstractmethod
    async def get_products(self) -> List[Product]:
        """Return every stored product."""


# ========== Domain Service Interface ==========

class IProductService(ABC):
    """Interface consumed by the HTTP layer."""

    @abstractmethod
    async def add_product(self, request: AddProductRequest) -> ProductResponse:
        """Add a product."""

    @abstractmethod
    async def get_products(self) -> List[ProductResponse]:
        """List products."""


# ========== Application Services ==========

class ProductService(IProductService):
    """
    Service for adding and listing products.

    No business rules are enforced; storage errors propagate unchanged.
    """

    def __init__(self, data_service: IProductDataService):
        self._data = data_service

    async def add_product(self, request: AddProductRequest) -> ProductResponse:
        # TODO: reject empty names and negative prices once clients agree on a 422 contract
        product = request.to_domain()
        product = await self._data.add_product(product)
        return ProductResponse.from_domain(product)

    async def get_products(self) -> List[ProductResponse]:
        products = await self._data.get_products()
        return [ProductResponse.from_domain(p) for p in products]
