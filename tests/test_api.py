"""Tests for the example API wiring."""
import pytest


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_has_security_headers(client):
    resp = await client.get("/health")
    assert resp.headers["x-content-type-options"] == "nosniff"
    assert resp.headers["x-frame-options"] == "SAMEORIGIN"
    assert resp.headers["cross-origin-opener-policy"] == "same-origin"
    assert "strict-transport-security" not in resp.headers


@pytest.mark.asyncio
async def test_not_found_still_gets_headers(client):
    resp = await client.get("/does-not-exist")
    assert resp.status_code == 404
    assert resp.headers["referrer-policy"] == "no-referrer"
