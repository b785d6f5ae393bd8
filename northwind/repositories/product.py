"""
Product repository for persisting and loading products.

Writes flush immediately, each inside its own SAVEPOINT, so that a
product pointing at a missing category fails here, as a
ReferentialIntegrityError, rather than at some later commit.
"""

from decimal import Decimal
from typing import Optional, Union

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from northwind.core.logging_config import get_logger, log_with_context
from northwind.models.product import Product
from northwind.repositories.base import add_or_raise

logger = get_logger(__name__)


class ProductRepository:
    """
    Repository for product data access.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_product(
        self,
        product_name: str,
        category_id: int,
        unit_price: Optional[Union[Decimal, float, str]] = None,
        units_in_stock: Optional[int] = None,
        discontinued: bool = False,
        product_id: Optional[int] = None,
    ) -> Product:
        """
        Create and flush a new product.

        Args:
            product_name: Display name, at most 40 characters
            category_id: Primary key of an existing category
            unit_price: Optional price, stored as fixed-point decimal
            units_in_stock: Optional stock count
            discontinued: Whether the product is withdrawn
            product_id: Explicit primary key (generated when None)

        Returns:
            Persisted Product with its primary key populated

        Raises:
            LengthConstraintError: If product_name is too long
            ReferentialIntegrityError: If category_id does not exist

        Example:
            >>> chai = await repo.create_product(
            ...     "Chai", category_id=1, unit_price="18.00", units_in_stock=39
            ... )
            >>> chai.unit_price
            Decimal('18.00')
        """
        product = Product(
            product_id=product_id,
            product_name=product_name,
            unit_price=unit_price,
            units_in_stock=units_in_stock,
            discontinued=discontinued,
            category_id=category_id,
        )
        return await self.add_product(product)

    async def add_product(self, product: Product) -> Product:
        """
        Persist an already constructed product.

        When only ``product.category`` is set, the flush fills in
        ``category_id`` from it; when only ``category_id`` is set, the
        owning category is loaded afterwards so ``product.category`` is
        readable without further IO.

        Raises:
            ReferentialIntegrityError: If the referenced category does not exist
            ConstraintViolationError: For other rejected writes
        """
        await add_or_raise(
            self.session,
            product,
            entity="Product",
            entity_id=product.product_id,
            constraint="PK_Product",
            foreign_key="Product.CategoryId",
            foreign_key_value=product.category_id,
        )
        if "category" in inspect(product).unloaded:
            await self.session.refresh(product, ["category"])
        log_with_context(
            logger, "info", "Product created",
            entity="Product", entity_id=product.product_id,
            category_id=product.category_id,
        )
        return product

    async def get_product(self, product_id: int) -> Optional[Product]:
        """
        Retrieve a product by primary key, with its category loaded.

        Returns:
            Product instance if found, None otherwise
        """
        stmt = select(Product).where(Product.product_id == product_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_products_by_category(self, category_id: int) -> list[Product]:
        """
        List products whose foreign key points at ``category_id``.

        Returns:
            List of Product instances ordered by primary key
        """
        stmt = (
            select(Product)
            .where(Product.category_id == category_id)
            .order_by(Product.product_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
