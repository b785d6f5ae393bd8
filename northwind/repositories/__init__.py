"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating database access from business logic.
"""

from northwind.repositories.category import CategoryRepository
from northwind.repositories.product import ProductRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
]
