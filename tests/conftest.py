"""Shared test fixtures and utilities for all tests."""
import asyncio
import os
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from src.app.containers import Container
from src.sdk import ClientApiClient
from src.shared.database.database import Database, DatabaseSettings


@pytest.fixture(scope="module")
def async_db_url(tmp_path_factory):
    """
    Async database URL shared by the tests of a module.

    Uses a temporary SQLite file by default. Set TEST_DATABASE_BACKEND=postgres
    to run against PostgreSQL in a container instead.
    """
    if os.getenv("TEST_DATABASE_BACKEND", "sqlite") == "postgres":
        with PostgresContainer("postgres:16-alpine") as postgres:
            connection_url = postgres.get_connection_url()
            yield connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    else:
        db_file = tmp_path_factory.mktemp("db") / "clients.db"
        yield f"sqlite+aiosqlite:///{db_file}"


@pytest.fixture(scope="module")
def test_settings_override(async_db_url):
    """
    Centralized settings override for all test configurations.
    Module-scoped to set up environment once per test module.
    """
    os.environ["DATABASE_URL"] = async_db_url

    # Clear settings cache to force reload with new env vars
    from src.app.config import get_settings
    get_settings.cache_clear()

    yield

    os.environ.pop("DATABASE_URL", None)
    get_settings.cache_clear()


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Args:
        db: Database instance to test
        max_attempts: Maximum number of connection attempts

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db_settings = DatabaseSettings(db_url=async_db_url)
    db = Database(db_settings)
    await wait_till_db_ready(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    await db.drop_schema()
    await db.create_schema()
    yield db


@pytest.fixture(scope="function")
def test_container(test_settings_override, clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()

    # Override the database singleton with the test database instance
    container.database.override(providers.Object(clean_database))

    container.wire(modules=[
        "src.app.api.v1.clients",
    ])
    yield container
    container.database.reset_override()
    container.unwire()


@asynccontextmanager
async def _no_lifespan(app: FastAPI):
    # Tables are already created by the clean_database fixture
    yield


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    from src.app.main import create_app

    yield create_app(test_container, lifespan=_no_lifespan)


@pytest_asyncio.fixture
async def api_client(test_app):
    """
    Create an API client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = ClientApiClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest_asyncio.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest_asyncio.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()
