"""
Global test fixtures for the Bookshelf API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Seeded library database
- FastAPI app and test clients wired to the mock store
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Cheap hashing for tests; must be set before settings are first read
os.environ.setdefault("BCRYPT_ROUNDS", "4")


TEST_DB_NAME = "bookshelf_test"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def library_db(mock_async_mongo_client):
    """Provide an empty mock library database with indexes."""
    from bookshelf.database.library_db import create_indexes

    db = mock_async_mongo_client[TEST_DB_NAME]
    await create_indexes(db)
    yield db


@pytest_asyncio.fixture
async def seeded_db(library_db):
    """Library database loaded with the sample books and users."""
    from bookshelf.database.seed import seed_database

    await seed_database(library_db)
    yield library_db


@pytest.fixture
def mock_store(mock_async_mongo_client):
    """MongoStore wrapping the mock client."""
    from bookshelf.database.connections import MongoStore
    return MongoStore(db_name=TEST_DB_NAME, client=mock_async_mongo_client)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def bob_id() -> str:
    """ID of the seeded user Bob."""
    return "7d2e85951b62fc093cc3319b"


@pytest.fixture
def sample_books() -> list[dict]:
    """Sample books as stored, with `_id` rendered as a string."""
    from bookshelf.database.seed import SAMPLE_BOOKS
    return [book.model_dump(by_alias=True) for book in SAMPLE_BOOKS]


@pytest.fixture
def new_user_data() -> dict:
    """Registration body for a user that does not exist yet."""
    return {
        "name": "Tom",
        "email": "tom@gmail.com",
        "password": "qwe",
        "passwordConfirmation": "qwe",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_store):
    """
    Create FastAPI app for testing, backed by the mock store.
    """
    from bookshelf.main import create_app
    return create_app(store=mock_store)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Runs the application lifespan. Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app, seeded_db):
    """
    Create an async test client over seeded data.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
