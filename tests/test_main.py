"""Tests for app wiring and error handling."""
import httpx
import pytest
from sqlalchemy.exc import SQLAlchemyError

from doctors_portal.main import create_app


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Doctors Portal Server"}


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_store_failure_returns_generic_error(client, repos, monkeypatch):
    async def broken(*args):
        raise SQLAlchemyError("database is down")

    monkeypatch.setattr(repos.catalog, "list_options", broken)

    response = await client.get("/appointmentOptions", params={"date": "2024-01-01"})
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage operation failed"}
    assert "access-control-allow-origin" in response.headers


@pytest.mark.asyncio
async def test_store_failure_does_not_affect_next_request(client, repos, catalog, monkeypatch):
    async def broken(*args):
        raise SQLAlchemyError("database is down")

    monkeypatch.setattr(repos.catalog, "available_slots", broken)
    assert (await client.get("/v2/appointmentOptions")).status_code == 500
    monkeypatch.undo()

    response = await client.get("/v2/appointmentOptions")
    assert response.status_code == 200
    assert len(response.json()) == 3


@pytest.mark.asyncio
async def test_unhandled_error_returns_500(repos, monkeypatch):
    async def broken(*args):
        raise RuntimeError("boom")

    monkeypatch.setattr(repos.bookings, "get", broken)
    app = create_app(repositories=repos)
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/bookings/1")

    assert response.status_code == 500
    assert response.json() == {"detail": "RuntimeError: boom"}


@pytest.mark.asyncio
async def test_cors_preflight(client):
    response = await client.options(
        "/bookings",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
