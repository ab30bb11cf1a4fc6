"""
Column Types
============

Custom SQLAlchemy column types shared by the module models.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from sqlalchemy import Numeric, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator


class FixedDecimal(TypeDecorator):
    """
    Exact fixed-point decimal, NUMERIC(precision, scale).

    Server databases store it natively. SQLite has no exact numeric storage,
    so there the value is kept as its decimal text.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 18, scale: int = 2):
        super().__init__(precision=precision, scale=scale, asdecimal=True)
        self.precision = precision
        self.scale = scale

    def quantize(self, value: Any) -> Optional[Decimal]:
        """Round to the column scale the way NUMERIC does."""
        if value is None:
            return None
        return Decimal(value).quantize(Decimal(1).scaleb(-self.scale), rounding=ROUND_HALF_UP)

    def load_dialect_impl(self, dialect: Dialect):
        if dialect.name == "sqlite":
            # digits + sign + decimal point
            return dialect.type_descriptor(String(self.precision + 2))
        return dialect.type_descriptor(Numeric(self.precision, self.scale, asdecimal=True))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        value = self.quantize(value)
        if value is not None and dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value: Any, dialect: Dialect) -> Optional[Decimal]:
        return self.quantize(value)
