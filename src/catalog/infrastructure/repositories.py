"""
Catalog Infrastructure Repositories
===================================

SQLAlchemy implementation of the product data service.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog.application import IProductDataService
from src.catalog.domain import Product
from src.catalog.infrastructure.models import ProductModel
from src.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)


class SQLAlchemyProductDataService(IProductDataService):
    """
    SQLAlchemy implementation of product persistence.

    Works on the request-scoped session it is given.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add_product(self, product: Product) -> Product:
        """Insert the product and commit, returning it with its new id."""
        model = ProductModel.from_entity(product)
        self._session.add(model)

        try:
            with log_latency(logger, "add_product"):
                await self._session.commit()
        except SQLAlchemyError:
            # Leave the session usable for the next unit of work
            await self._session.rollback()
            raise

        return model.to_entity()

    async def get_products(self) -> List[Product]:
        """Read the whole table."""
        with log_latency(logger, "get_products"):
            result = await self._session.execute(select(ProductModel))
        return [model.to_entity() for model in result.scalars().all()]
