"""
Category model, the parent side of the catalog relationship.

A category owns zero or more products through the ``products`` navigation
set; the authoritative link is the foreign key held by each Product.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship, validates

from northwind.models.base import Base, ModelMixin, check_string
from northwind.models.types import LargeText


CATEGORY_NAME_MAX_LENGTH = 15


class Category(Base, ModelMixin):
    """
    Category grouping related products.

    Attributes:
        category_id: Integer primary key (column CategoryId)
        category_name: Display name, at most 15 characters (column CategoryName)
        description: Optional long-form description (column Description)
        products: Set of Product instances in this category

    Note:
        ``products`` is an empty set on a newly constructed instance.
        Adding a product to it does not touch the product's category_id
        until the session flushes.
    """

    __tablename__ = "Category"
    __repr_attrs__ = ("category_id", "category_name")

    category_id = Column(
        "CategoryId",
        Integer,
        primary_key=True,
        doc="Primary key"
    )

    category_name = Column(
        "CategoryName",
        String(CATEGORY_NAME_MAX_LENGTH),
        nullable=False,
        doc="Category display name"
    )

    description = Column(
        "Description",
        LargeText,
        nullable=True,
        doc="Free-text description of the category"
    )

    # Relationships
    products = relationship(
        "Product",
        back_populates="category",
        collection_class=set,
        lazy="selectin",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("products", set())
        super().__init__(**kwargs)

    @validates("category_name")
    def _validate_category_name(self, key: str, value: str) -> str:
        return check_string("CategoryName", value, CATEGORY_NAME_MAX_LENGTH)
