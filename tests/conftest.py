"""
Shared pytest fixtures for all tests.
This file is automatically loaded by pytest.
"""
import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import MongoClient
from pymongo.errors import PyMongoError

# CRITICAL: Point settings at the test database BEFORE importing the app
# This must happen before any Settings objects are created
os.environ["DB_NAME"] = "onlineshop_test"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("DB_URL", "mongodb://localhost:27017")

from main import app  # noqa: E402
from tests.test_config import TestSettings  # noqa: E402
from tests.test_safety import get_safe_test_db_name, verify_test_environment  # noqa: E402

COLLECTIONS = ["employees", "departments", "customers", "counters"]


def pytest_runtest_setup(item):
    """
    Safety hook: Runs before each test to verify we're using the test database.
    This prevents accidental writes to production/development databases.
    """
    if "mongodb" in item.fixturenames or "client" in item.fixturenames:
        verify_test_environment()


@pytest.fixture(scope="session")
def mongodb_available() -> bool:
    """Ping the test server once; database backed tests are skipped without it"""
    settings = TestSettings()
    sync_client = MongoClient(settings.DB_URL, serverSelectionTimeoutMS=1500)
    try:
        sync_client.admin.command("ping")
        return True
    except PyMongoError:
        return False
    finally:
        sync_client.close()


@pytest_asyncio.fixture
async def mongodb(mongodb_available):
    """MongoDB test database - function scoped for a fresh connection per test"""
    if not mongodb_available:
        pytest.skip("MongoDB test server is not reachable")

    settings = TestSettings()
    motor_client = AsyncIOMotorClient(settings.DB_URL)
    db = motor_client[settings.DB_NAME]

    # CRITICAL: Verify we're using the correct test database
    assert db.name == get_safe_test_db_name(), f"❌ SAFETY CHECK FAILED: got '{db.name}'"

    # Clean before test
    for collection_name in COLLECTIONS:
        await db[collection_name].delete_many({})

    yield db

    # Clean after test
    for collection_name in COLLECTIONS:
        await db[collection_name].delete_many({})

    # Close client to prevent event loop issues
    motor_client.close()


@pytest_asyncio.fixture
async def client(mongodb):
    """HTTP client for API testing against the test database"""
    app.state.mongodb = mongodb

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.state.mongodb = None


@pytest_asyncio.fixture
async def api_client():
    """
    HTTP client without a database, for router slice tests.

    Tests install mocks through ``app.dependency_overrides``; they are
    removed afterwards. Unhandled exceptions are returned as 500 responses
    instead of being re-raised into the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
