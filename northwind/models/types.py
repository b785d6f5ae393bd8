"""
Column types shared by the catalog models.

Maps the money and large-text storage hints onto the closest type each
dialect offers.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String, Text
from sqlalchemy.dialects import mssql
from sqlalchemy.types import TypeDecorator


MONEY_PRECISION = 19
MONEY_SCALE = 4

_MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_SCALE)


class DecimalText(TypeDecorator):
    """
    Fixed-point decimal stored as TEXT.

    SQLite has no exact decimal storage: NUMERIC columns coerce values to
    REAL. Values are quantized to MONEY_SCALE places and written as plain
    strings, then read back as Decimal.

    Note:
        Comparisons and ORDER BY inside SQLite operate on the text form.
    """

    impl = String(MONEY_PRECISION + 2)
    cache_ok = True

    def process_bind_param(self, value: Optional[Decimal], dialect) -> Optional[str]:  # noqa: ANN001
        if value is None:
            return None
        return format(Decimal(value).quantize(_MONEY_QUANTUM), "f")

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:  # noqa: ANN001
        if value is None:
            return None
        return Decimal(value)


# Fixed-point currency amount; native MONEY on SQL Server, exact text on SQLite.
Money = (
    Numeric(MONEY_PRECISION, MONEY_SCALE, asdecimal=True)
    .with_variant(mssql.MONEY(), "mssql")
    .with_variant(DecimalText(), "sqlite")
)

# Unbounded text; NTEXT where SQL Server is the target.
LargeText = Text().with_variant(mssql.NTEXT(), "mssql")
