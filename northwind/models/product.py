"""
Product model, the child side of the catalog relationship.

Each product references exactly one Category, both through the
``category_id`` foreign key and the ``category`` navigation reference.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
    false,
)
from sqlalchemy.orm import relationship, validates

from northwind.core.exceptions import ValidationError
from northwind.models.base import Base, ModelMixin, check_string
from northwind.models.types import Money


PRODUCT_NAME_MAX_LENGTH = 40


class Product(Base, ModelMixin):
    """
    Product sold within a category.

    Attributes:
        product_id: Integer primary key (column ProductId)
        product_name: Display name, at most 40 characters (column ProductName)
        unit_price: Optional fixed-point price (column UnitPrice)
        units_in_stock: Optional 16-bit stock count (column UnitsInStock)
        discontinued: Whether the product is withdrawn, defaults to False
        category_id: Foreign key to Category.CategoryId
        category: Owning Category instance

    Note:
        Assigning ``category`` does not rewrite ``category_id`` until the
        session flushes, and assigning ``category_id`` never loads
        ``category``. Callers that set both keep them consistent.
    """

    __tablename__ = "Product"
    __repr_attrs__ = ("product_id", "product_name", "category_id")

    product_id = Column(
        "ProductId",
        Integer,
        primary_key=True,
        doc="Primary key"
    )

    product_name = Column(
        "ProductName",
        String(PRODUCT_NAME_MAX_LENGTH),
        nullable=False,
        doc="Product display name"
    )

    unit_price = Column(
        "UnitPrice",
        Money,
        nullable=True,
        doc="Price per unit"
    )

    units_in_stock = Column(
        "UnitsInStock",
        SmallInteger,
        nullable=True,
        doc="Units currently in stock"
    )

    discontinued = Column(
        "Discontinued",
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        doc="True once the product is no longer sold"
    )

    category_id = Column(
        "CategoryId",
        Integer,
        ForeignKey("Category.CategoryId", name="FK_Product_Category"),
        nullable=False,
        doc="Foreign key to Category"
    )

    # Relationships
    category = relationship(
        "Category",
        back_populates="products",
        lazy="selectin",
    )

    # Indexes
    __table_args__ = (
        Index("IX_Product_CategoryId", "CategoryId"),
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("discontinued", False)
        super().__init__(**kwargs)

    @validates("product_name")
    def _validate_product_name(self, key: str, value: str) -> str:
        return check_string("ProductName", value, PRODUCT_NAME_MAX_LENGTH)

    @validates("unit_price")
    def _validate_unit_price(
        self, key: str, value: Optional[Union[Decimal, float, int, str]]
    ) -> Optional[Decimal]:
        # Go through str() so 18.1 becomes Decimal("18.1"), not its binary expansion.
        if value is None or isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(
                "UnitPrice", f"UnitPrice must be a decimal number (got {value!r})"
            ) from None
