"""
Catalog Domain Entities
=======================

Pure Python business objects for the product catalog.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """
    Product entity.

    ``id`` stays None until the storage layer inserts the product.
    """
    name: str
    price: Decimal
    description: Optional[str] = None
    id: Optional[int] = None
