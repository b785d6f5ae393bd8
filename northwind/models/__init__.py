"""
SQLAlchemy ORM models for the product catalog.

This module exports all database models and the declarative base.
Import models from this module to ensure they're registered with SQLAlchemy.
"""

from northwind.models.base import Base, ModelMixin
from northwind.models.category import Category, CATEGORY_NAME_MAX_LENGTH
from northwind.models.product import Product, PRODUCT_NAME_MAX_LENGTH
from northwind.models.interfaces import IProduct

# Export all models
__all__ = [
    # Base classes
    "Base",
    "ModelMixin",
    # Models
    "Category",
    "Product",
    # Interfaces
    "IProduct",
    # Declared limits
    "CATEGORY_NAME_MAX_LENGTH",
    "PRODUCT_NAME_MAX_LENGTH",
]
