"""API test fixtures - FastAPI test client over fresh in-memory storage.

Invariants:
    - Every test gets fresh repositories (no state shared through MemoryStore)
    - The coordinate resolver is always a stub: no network calls in route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from placeshare.api.dependencies import Repositories, get_repositories
from placeshare.infrastructure.geocoding_client import get_coordinate_resolver
from placeshare.main import app


@pytest.fixture
def repositories(place_repo, user_repo):
    return Repositories(places=place_repo, users=user_repo)


@pytest.fixture
async def client(repositories, resolver):
    """FastAPI test client with storage and resolver dependencies overridden."""
    async def override_repositories():
        yield repositories

    app.dependency_overrides[get_repositories] = override_repositories
    app.dependency_overrides[get_coordinate_resolver] = lambda: resolver

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def signed_up_user(client):
    """Register a user through the API and return its JSON representation."""
    res = await client.post("/api/users/signup", json={
        "name": "Max Schwarz",
        "email": "max@example.com",
        "password": "secret-pass",
    })
    assert res.status_code == 201
    return res.json()["user"]
