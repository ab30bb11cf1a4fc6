"""
Catalog Application DTOs
========================

Data Transfer Objects for the catalog API layer.

Pydantic models for request/response serialization. Field types are coerced
but values are not validated: an empty name or a negative price passes.

Prices are exact decimals. They are accepted as a JSON number or string and
written back as decimal text, so no digit goes through a binary float.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.catalog.domain import Product


# ========== Request DTOs ==========

class AddProductRequest(BaseModel):
    """Request model for adding a product. Carries no identity."""
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Optional product description")
    price: Decimal = Field(..., description="Unit price (18 digits, 2 decimals)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Espresso Machine",
                "description": "15 bar pump, stainless steel",
                "price": 249.99
            }
        }
    )

    def to_domain(self) -> Product:
        """Convert to an unsaved domain entity."""
        return Product(
            name=self.name,
            description=self.description,
            price=self.price
        )


# ========== Response DTOs ==========

class ProductResponse(BaseModel):
    """Response model mirroring a stored product."""
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal = Field(..., description="Unit price as exact decimal text")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Espresso Machine",
                "description": "15 bar pump, stainless steel",
                "price": "249.99"
            }
        }
    )

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        """Create from domain entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price
        )
