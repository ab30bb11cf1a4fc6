"""
Catalog Module
==============

Bounded Context for the product catalog.

Responsibilities:
- Add a product (identity assigned by the database)
- List all products
"""

__version__ = "1.0.0"
