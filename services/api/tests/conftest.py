"""Shared fixtures: a throwaway SQLite database and an API client bound to it."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from benefits.main import create_app
from benefits.services.auth import register_user
from benefits.services.seed import seed_catalog
from benefits.settings import Settings
from benefits.stores.database import Database

TEST_JWT_SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        debug=False,
        jwt_secret=TEST_JWT_SECRET,
        create_tables_on_startup=False,
        seed_enabled=True,
    )


@pytest.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    """On-disk SQLite so concurrent sessions see each other's commits."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'benefits.db'}")
    await db.connect()
    await db.create_tables()
    try:
        yield db
    finally:
        await db.close()


@pytest.fixture
async def seeded_database(database: Database) -> Database:
    await seed_catalog(database)
    return database


@pytest.fixture
async def client(settings: Settings, database: Database) -> AsyncIterator[AsyncClient]:
    """Create test client.

    ASGITransport does not run the lifespan, so the database fixture connects it.
    """
    app = create_app(settings=settings, database=database)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def alice(database: Database):
    """A registered, unverified user."""
    return await register_user(database, email="alice@x.com", password="pw", name="Alice")


@pytest.fixture
def auth_headers(client: AsyncClient):
    """Log in through the API and return bearer headers."""

    async def _auth_headers(email: str = "alice@x.com", password: str = "pw") -> dict[str, str]:
        response = await client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _auth_headers
