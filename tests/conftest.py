"""
Shared test fixtures.

State lives in memory on the app, so every ``client`` gets a freshly
built app and therefore an empty map session.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.domain.session import MapSession

# Bandung, ITB campus
P0 = (-6.891161, 107.610633)
P1 = (-6.892000, 107.611000)
P2 = (-6.890500, 107.612500)


@pytest.fixture
def map_session() -> MapSession:
    return MapSession()


@pytest.fixture
def three_points(map_session: MapSession) -> MapSession:
    for lat, lng in (P0, P1, P2):
        map_session.on_placement(lat, lng)
    return map_session


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from src.api.app import create_app
    from src.api.middleware import limiter

    limiter.reset()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
