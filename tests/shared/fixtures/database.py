"""
Testcontainers-based PostgreSQL fixtures for integration tests.

Provides an ephemeral Postgres instance for the test session and a freshly
created schema for each test.

Usage:
    from tests.shared.fixtures.database import database

    async def test_something(database):
        store = SeedUnitOfWorkSQLAlchemy(database)
"""

import pytest
import pytest_asyncio
from testcontainers.postgres import PostgresContainer

from lancer.infrastructure.persistence.sqlalchemy import Base, Database

# Use same Postgres major version as production
POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean schema via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_url(postgres_container) -> str:
    """Plain connection URL of the container, as an operator would set it."""
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    return postgres_container.get_connection_url().replace(
        "postgresql+psycopg2://", "postgresql://"
    )


@pytest_asyncio.fixture(scope="function")
async def database(database_url):
    """
    Provide a Database with an empty marketplace schema.

    Function-scoped so the engine lives on the test's own event loop.
    """
    async with Database(database_url) as db:
        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await db.create_tables()

        yield db

        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
