from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from registry.config import get_settings
from registry.main import create_app
from registry.observability.metrics import reset_metrics
from registry.services.user_service import UserRegistryService
from registry.services.user_store import UserStore


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "true")
    get_settings.cache_clear()
    reset_metrics()

    yield

    reset_metrics()
    get_settings.cache_clear()


@pytest.fixture
def registry() -> UserRegistryService:
    return UserRegistryService(UserStore())


@pytest.fixture
def app(registry: UserRegistryService) -> FastAPI:
    return create_app(registry=registry)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
