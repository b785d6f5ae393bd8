"""
Seed the catalog with a starter category and product.

Creates the "Beverages" category (id 1) and the "Chai" product (id 1).
This script is idempotent - rows that already exist are left untouched.

Usage:
    ENABLE_DB_CREATE_ALL=1 python scripts/seed_catalog.py
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from northwind.core.config import settings
from northwind.core.database import async_session_maker, close_db, engine, init_db
from northwind.core.logging_config import get_logger, setup_logging
from northwind.repositories import CategoryRepository, ProductRepository

logger = get_logger(__name__)


async def seed_catalog() -> None:
    """Insert Beverages and Chai if they are missing."""
    if settings.is_sqlite and engine.url.database not in (None, "", ":memory:"):
        Path(engine.url.database).parent.mkdir(parents=True, exist_ok=True)

    await init_db()

    async with async_session_maker() as session:
        categories = CategoryRepository(session)
        products = ProductRepository(session)

        if await categories.category_exists(1):
            logger.info("Category 1 already exists. Skipping...")
        else:
            await categories.create_category(
                "Beverages",
                description="Soft drinks, coffees, teas, beers, and ales",
                category_id=1,
            )

        if await products.get_product(1) is not None:
            logger.info("Product 1 already exists. Skipping...")
        else:
            await products.create_product(
                "Chai",
                category_id=1,
                unit_price=Decimal("18.00"),
                units_in_stock=39,
                product_id=1,
            )

        await session.commit()

    await close_db()


if __name__ == "__main__":
    setup_logging(level=settings.log_level, json_format=settings.log_json)
    asyncio.run(seed_catalog())
