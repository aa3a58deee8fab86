"""Shared test fixtures: a tiny Starlette app per config."""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from helmet.config import HelmetConfig
from helmet.middleware.security_headers import security_headers


async def _hello(request):
    return PlainTextResponse("Hello, World!")


async def _skipped(request):
    return PlainTextResponse("Skipped!")


async def _partner_embed(request):
    return PlainTextResponse("Embedded", headers={
        "X-Frame-Options": "ALLOW-FROM https://partner.example",
        "Content-Security-Policy": "frame-ancestors https://partner.example",
    })


def make_app(config: HelmetConfig | None = None) -> Starlette:
    return Starlette(
        routes=[
            Route("/", _hello),
            Route("/filter", _skipped),
            Route("/embed", _partner_embed),
        ],
        middleware=[security_headers(config)],
    )


def make_client(app, scheme: str = "http") -> AsyncClient:
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url=f"{scheme}://test")


@pytest.fixture
def build_client():
    """Factory: build_client(config, scheme="http") -> AsyncClient."""
    def _build(config: HelmetConfig | None = None, scheme: str = "http") -> AsyncClient:
        return make_client(make_app(config), scheme)
    return _build


@pytest_asyncio.fixture
async def client():
    """Client for the example FastAPI app."""
    from helmet.api.main import app

    async with make_client(app) as c:
        yield c
