"""
Catalog Infrastructure Models
=============================

SQLAlchemy ORM models for the catalog module.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base
from src.infrastructure.database.types import FixedDecimal
from src.catalog.domain import Product

PRICE_TYPE = FixedDecimal(precision=18, scale=2)


class ProductModel(Base):
    """
    Database model for the Product entity.

    Price is fixed-point NUMERIC(18, 2).
    """
    __tablename__ = "products"

    # Primary key, generated by the database
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(PRICE_TYPE, nullable=False)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductModel":
        # id is never copied; the database assigns it
        return cls(
            name=product.name,
            description=product.description,
            price=PRICE_TYPE.quantize(product.price)
        )

    def to_entity(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price
        )
