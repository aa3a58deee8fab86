"""Example API: FastAPI application wired with the security headers middleware."""
from __future__ import annotations

import logging

from helmet.logging_config import setup_logging
setup_logging()
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helmet.settings import settings
from helmet.config import HelmetConfig
from helmet.middleware.security_headers import SecurityHeadersMiddleware
from helmet.startup_checks import validate_settings

logger = logging.getLogger(__name__)

helmet_config = HelmetConfig.from_settings(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report settings that have no effect before serving traffic."""
    validate_settings(helmet_config)
    yield
    logger.info("Shutdown complete")


app = FastAPI(
    title="Helmet API",
    version="0.1.0",
    description="Security response headers for Starlette/FastAPI",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Security headers, outermost layer
app.add_middleware(SecurityHeadersMiddleware, config=helmet_config)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
