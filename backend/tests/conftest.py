"""
Brewery Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh SQLite file per test):
    ├── test_settings:    Settings pointing at tmp_path/brewery.db
    ├── app:              create_app(test_settings) with the schema created
    ├── test_client:      HTTPX AsyncClient talking to `app` in-process
    ├── session_factory:  standalone engine + sessions for repository tests
    ├── beer_payload:     the "Galaxy Cat" beer as wire JSON
    ├── seeded_beers:     three beers inserted through the service
    └── mock_beer_repository / mock_customer_repository: AsyncMock repositories
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any brewery import: brewery.main builds its
# module-level app (and engine) at import time
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="brewery_test_"), "import.db")
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from brewery.config import Settings
from brewery.database import Base, build_engine, build_session_factory
from brewery.main import create_app
from brewery.schemas.beer import BeerRequest
from brewery.schemas.customer import CustomerRequest


GALAXY_CAT = {
    "beerName": "Galaxy Cat",
    "beerStyle": "Pale Ale",
    "upc": "12356",
    "quantityOnHand": 122,
    "price": "12.99",
}

SAMPLE_BEERS = [
    GALAXY_CAT,
    {"beerName": "Crank", "beerStyle": "Pale Ale", "upc": "12356222",
     "quantityOnHand": 392, "price": "11.99"},
    {"beerName": "Sunshine City", "beerStyle": "IPA", "upc": "12356",
     "quantityOnHand": 144, "price": "13.99"},
]

SAMPLE_CUSTOMERS = ["Customer 1", "Customer 2", "Customer 3"]


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path):
    """Settings bound to a throwaway SQLite database for this test only."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'brewery.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(test_settings):
    """
    A fully assembled application with an empty schema.

    ASGITransport does not run the lifespan, so the schema is created here
    and the engine disposed on teardown.
    """
    application = create_app(test_settings)
    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly into the app (no server needed).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def session_factory(test_settings):
    """Engine + session factory without the HTTP layer, for repository tests."""
    engine = build_engine(test_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


# ══════════════════════════════════════════════════════════════════════════
# Data Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def beer_payload():
    return dict(GALAXY_CAT)


@pytest_asyncio.fixture
async def seeded_beers(app):
    """Insert the three sample beers (ids 1, 2, 3) and return their DTOs."""
    service = app.state.beer_service
    return [
        await service.save_beer(BeerRequest.model_validate(payload))
        for payload in SAMPLE_BEERS
    ]


@pytest_asyncio.fixture
async def seeded_customers(app):
    service = app.state.customer_service
    return [
        await service.save_customer(CustomerRequest(customer_name=name))
        for name in SAMPLE_CUSTOMERS
    ]


# ══════════════════════════════════════════════════════════════════════════
# Mock Repositories
# ══════════════════════════════════════════════════════════════════════════

def _mock_repository():
    """
    A repository double: awaitable CRUD methods, `save` echoes its argument.

    `find_all` is an async generator in the real class; tests that need it
    assign their own generator function.
    """
    repository = MagicMock()
    repository.find_by_id = AsyncMock(return_value=None)
    repository.save = AsyncMock(side_effect=lambda entity: entity)
    repository.delete_by_id = AsyncMock(return_value=True)
    repository.count = AsyncMock(return_value=0)
    return repository


@pytest.fixture
def mock_beer_repository():
    return _mock_repository()


@pytest.fixture
def mock_customer_repository():
    return _mock_repository()
