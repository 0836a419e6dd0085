"""Pytest configuration and fixtures."""

import asyncio
import os

import pytest
import pytest_asyncio

# The app's own store is never used by tests; every test gets a fresh file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")

from fastapi.testclient import TestClient  # noqa: E402

from workova.api.deps import get_database  # noqa: E402
from workova.core.database import Database  # noqa: E402
from workova.core.rate_limit import limiter  # noqa: E402
from workova.main import app  # noqa: E402
from workova.services import AuthService, JobService, OfferService, UserService  # noqa: E402

limiter.enabled = False


@pytest_asyncio.fixture
async def database(tmp_path):
    """A fresh local store backed by a temporary SQLite file."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path}/test.db")
    await db.init()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def customer(database):
    return await AuthService(database).sign_up(
        email="casey@mail.com", display_name="Casey Customer"
    )


@pytest_asyncio.fixture
async def worker(database):
    account = await AuthService(database).sign_up(
        email="wren@mail.com", display_name="Wren Worker"
    )
    return await UserService(database).set_role(account.id, "worker")


@pytest_asyncio.fixture
async def open_job(database, customer):
    return await JobService(database).create_job(
        customer_id=customer.id,
        category_id="handyman",
        title="Fix leaky faucet",
        description="Kitchen faucet drips all night.",
        budget_min=50,
        budget_max=120,
    )


@pytest_asyncio.fixture
async def offer(database, open_job, worker):
    return await OfferService(database).create_offer(
        job_id=open_job.id,
        worker_id=worker.id,
        price=80,
        eta_text="Tomorrow 9am",
        message="I can bring a new cartridge.",
    )


@pytest_asyncio.fixture
async def chat(database, offer, customer):
    """Chat opened by the customer accepting the worker's offer."""
    return await OfferService(database).accept_offer(offer.id, customer.id)


async def _prepare(db: Database) -> None:
    # Create tables, then drop the pooled connections bound to this loop
    await db.init()
    await db.dispose()


@pytest.fixture
def api_database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path}/api.db")
    asyncio.run(_prepare(db))
    return db


@pytest.fixture
def client(api_database):
    """Test client whose routes all talk to api_database."""
    app.dependency_overrides[get_database] = lambda: api_database
    with TestClient(app) as test_client:
        yield test_client
        test_client.portal.call(api_database.dispose)
    app.dependency_overrides.clear()
