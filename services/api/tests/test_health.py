"""Tests for health endpoint and error mapping."""

import pytest
from httpx import ASGITransport, AsyncClient

from benefits.main import create_app
from benefits.settings import Settings
from benefits.stores.database import Database


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_unknown_route_uses_message_body(client: AsyncClient):
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_storage_fault_returns_generic_500(
    settings: Settings,
    database: Database,
    monkeypatch: pytest.MonkeyPatch,
):
    """Unexpected errors surface as 500 with a generic message."""
    from benefits.routes import deals as deal_routes

    async def broken_list_deals(db: Database):
        raise RuntimeError("connection reset by peer")

    monkeypatch.setattr(deal_routes, "list_deals", broken_list_deals)

    app = create_app(settings=settings, database=database)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        response = await ac.get("/api/deals")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
