"""Integration test fixtures for the HTTP service."""

from collections.abc import AsyncGenerator
from dataclasses import replace

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from payslip_engine.api.app import create_app
from payslip_engine.api.dependencies import get_app_settings
from payslip_engine.config import get_settings


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app()
    app.dependency_overrides[get_app_settings] = lambda: replace(
        get_settings(), strict_validation=True
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def lenient_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for a service with boundary validation turned off."""
    app = create_app()
    app.dependency_overrides[get_app_settings] = lambda: replace(
        get_settings(), strict_validation=False
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
