"""Tests for the admin scripts (run as `python -m scripts.<name>`)."""

from pathlib import Path

import pytest

from benefits.services.auth import register_user
from benefits.services.catalog import list_deals
from benefits.settings import get_settings
from benefits.stores.database import Database
from benefits.stores.users import UserStore


@pytest.fixture
async def script_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'scripts.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()

    db = Database(url)
    await db.connect()
    await db.create_tables()
    try:
        yield db
    finally:
        await db.close()
        get_settings.cache_clear()


@pytest.mark.asyncio
async def test_verify_user_script_sets_and_revokes(script_database: Database, capsys):
    from scripts import verify_user

    await register_user(script_database, email="alice@x.com", password="pw", name="Alice")

    assert await verify_user.main(["alice@x.com"]) == 0
    async with script_database.session() as session:
        assert (await UserStore(session).get_by_email("alice@x.com")).verified is True

    assert await verify_user.main(["alice@x.com", "--revoke"]) == 0
    async with script_database.session() as session:
        assert (await UserStore(session).get_by_email("alice@x.com")).verified is False

    assert "verified=False" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_verify_user_script_unknown_email(script_database: Database, capsys):
    from scripts import verify_user

    assert await verify_user.main(["nobody@x.com"]) == 1
    assert "No user with email" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_seed_script_loads_sample_catalog(script_database: Database):
    from scripts import seed

    await seed.seed_database()

    titles = {deal.title for deal in await list_deals(script_database)}
    assert "AWS Credits for Startups" in titles
    assert "Premium Slack Plan" in titles
    assert len(titles) == 4
