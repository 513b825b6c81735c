"""Shared test fixtures."""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from config.settings import Settings
from src.av_common.enums import Role
from src.av_engine.service import MarketplaceService
from src.main import app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(SEED_RANDOM_SEED=42)


@pytest.fixture
def service(test_settings: Settings) -> MarketplaceService:
    """Fresh, logged-out session with deterministic seed prices."""
    return MarketplaceService(test_settings, rng=random.Random(42))


@pytest.fixture
def buyer(service: MarketplaceService) -> MarketplaceService:
    service.login("buyer@example.com", "secret", Role.BUYER)
    return service


@pytest.fixture
def seller(service: MarketplaceService) -> MarketplaceService:
    service.login("seller@example.com", "secret", Role.SELLER)
    return service


@pytest.fixture
async def client(service: MarketplaceService) -> AsyncClient:
    """Async HTTP client bound to a fresh marketplace session."""
    app.state.marketplace = service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
