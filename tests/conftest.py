"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- A fresh in-memory database per test
- Session fixtures bound to that database
"""

import os
import sys
from pathlib import Path

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENABLE_DB_CREATE_ALL"] = "false"
os.environ["LOG_LEVEL"] = "DEBUG"

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture(scope="function")
async def engine(anyio_backend):
    """
    Provide an engine on a private in-memory database.

    Creates all tables before the test and disposes the engine after.
    """
    from northwind.core.database import get_async_engine
    from northwind.models import Base

    test_engine = get_async_engine(TEST_DATABASE_URL)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture(scope="function")
def session_maker(engine):
    """Session factory bound to the per-test engine."""
    from northwind.core.database import get_session_maker

    return get_session_maker(engine)


@pytest.fixture(scope="function")
async def async_session(session_maker):
    """
    Provide an async database session for repository tests.
    """
    async with session_maker() as session:
        yield session
