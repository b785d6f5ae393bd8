"""
Category repository for persisting and loading categories.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from northwind.core.logging_config import get_logger, log_with_context
from northwind.models.category import Category
from northwind.repositories.base import add_or_raise

logger = get_logger(__name__)


class CategoryRepository:
    """
    Repository for category data access.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_category(
        self,
        category_name: str,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> Category:
        """
        Create and flush a new category.

        Args:
            category_name: Display name, at most 15 characters
            description: Optional long description
            category_id: Explicit primary key (generated when None)

        Returns:
            Persisted Category with its primary key populated

        Raises:
            LengthConstraintError: If category_name is too long
            ConstraintViolationError: If the database rejects the row,
                e.g. a duplicate category_id

        Example:
            >>> beverages = await repo.create_category(
            ...     "Beverages", description="Soft drinks, coffees, teas"
            ... )
            >>> beverages.products
            set()
        """
        category = Category(
            category_id=category_id,
            category_name=category_name,
            description=description,
        )
        return await self.add_category(category)

    async def add_category(self, category: Category) -> Category:
        """
        Persist an already constructed category (and any products in its set).

        Raises:
            ReferentialIntegrityError: If a product in the set cannot be linked
            ConstraintViolationError: If the database rejects the row
        """
        await add_or_raise(
            self.session,
            category,
            entity="Category",
            entity_id=category.category_id,
            constraint="PK_Category",
            foreign_key="Product.CategoryId",
            foreign_key_value=category.category_id,
        )
        log_with_context(
            logger, "info", "Category created",
            entity="Category", entity_id=category.category_id,
        )
        return category

    async def get_category(self, category_id: int) -> Optional[Category]:
        """
        Retrieve a category by primary key, with its products loaded.

        Returns:
            Category instance if found, None otherwise
        """
        stmt = select(Category).where(Category.category_id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def category_exists(self, category_id: int) -> bool:
        stmt = select(Category.category_id).where(
            Category.category_id == category_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_all_categories(self) -> list[Category]:
        """
        Get all categories ordered by primary key.

        Returns:
            List of Category instances
        """
        stmt = select(Category).order_by(Category.category_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
