"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test settings with testing mode enabled
- Authenticated users for the use case and route tests
- A PostGIS backed Database handle for integration tests, skipped when the
  test database cannot be reached
"""

from collections.abc import AsyncGenerator

import asyncpg
import pytest
import pytest_asyncio

from geothing.core.schemas import AuthenticatedUser
from geothing.core.settings import Settings, get_settings
from geothing.db.postgres.connection import Database, init_connection
from tests.utils.database import create_schema, create_test_database, reset_tables

# Module-level state
_test_db_initialized = False
_test_db_unavailable = False

ADMIN_ID = 960901
OWNER_ID = 1001
OTHER_ID = 1002


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide test settings with testing mode enabled."""
    settings = get_settings()
    settings.testing = True
    return settings


@pytest.fixture
def admin_user() -> AuthenticatedUser:
    """An admin caller."""
    return AuthenticatedUser(user_id=ADMIN_ID, is_admin=True, login="goadmin")


@pytest.fixture
def owner_user() -> AuthenticatedUser:
    """A regular caller owning the things of the tests."""
    return AuthenticatedUser(user_id=OWNER_ID, is_admin=False, login="owner")


@pytest.fixture
def other_user() -> AuthenticatedUser:
    """A regular caller owning nothing."""
    return AuthenticatedUser(user_id=OTHER_ID, is_admin=False, login="other")


@pytest_asyncio.fixture(scope="function")
async def postgres_pool(test_settings: Settings) -> AsyncGenerator[asyncpg.Pool, None]:
    """Provide a connection pool on the test database.

    Creates a fresh pool for each test to avoid event loop issues. The schema
    is created once; both tables are emptied and seeded before each test.
    """
    global _test_db_initialized, _test_db_unavailable

    if _test_db_unavailable:
        pytest.skip("PostGIS test database not available")

    if not _test_db_initialized:
        try:
            await create_test_database(test_settings)
        except (OSError, asyncpg.PostgresError, TimeoutError) as e:
            _test_db_unavailable = True
            pytest.skip(f"PostGIS test database not available: {e}")

    pool = await asyncpg.create_pool(
        user=test_settings.postgres_user,
        password=test_settings.postgres_password,
        host=test_settings.postgres_host,
        port=test_settings.postgres_port,
        database=test_settings.test_postgres_db,
        min_size=1,
        max_size=4,
        init=init_connection,
    )

    if not _test_db_initialized:
        await create_schema(pool, test_settings)
        _test_db_initialized = True

    await reset_tables(pool, test_settings)

    yield pool

    await pool.close()


@pytest.fixture
def database(postgres_pool: asyncpg.Pool, test_settings: Settings) -> Database:
    """Database handle over the test pool."""
    return Database(postgres_pool, command_timeout=test_settings.db_command_timeout)
