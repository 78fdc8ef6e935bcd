"""Shared test fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.rf_raffle.api.dependencies import get_controller
from src.rf_raffle.application.service import RaffleController
from src.rf_raffle.engine.engine import DrawEngine


@pytest.fixture
def controller() -> RaffleController:
    """Controller with the animation phase switched off."""
    return RaffleController(engine=DrawEngine(animation_ms=0))


@pytest.fixture
async def client(controller: RaffleController) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to a fresh controller per test."""
    app.dependency_overrides[get_controller] = lambda: controller
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_controller, None)
