"""Error Handlers - terminal stage behaviour for every failure class.

Invariants:
    - Unmatched routes -> 404 "Could not find this route."
    - Unclassified faults -> 500 with the generic message, no internals leaked
    - Validation failure short-circuits before the resource operation (spy never called)
    - Every error body is exactly {"message": str}
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from placeshare.api.dependencies import get_place_service, get_user_service
from placeshare.api.error_handlers import register_error_handlers
from placeshare.core.errors import DatabaseError, ResourceNotFoundError
from placeshare.main import app
from tests.fakes import SpyService


async def test_unmatched_route_returns_404(client):
    res = await client.get("/api/unknown/route")

    assert res.status_code == 404
    assert res.json() == {"message": "Could not find this route."}


@pytest.mark.parametrize("method, path", [
    ("PUT", "/api/places/abc"),
    ("GET", "/api/places"),
    ("DELETE", "/api/users"),
    ("GET", "/api/users/signup"),
])
async def test_unhandled_method_on_known_path_returns_404(client, method, path):
    res = await client.request(method, path)

    assert res.status_code == 404
    assert res.json() == {"message": "Could not find this route."}
    assert "allow" not in res.headers


async def test_invalid_place_payload_never_reaches_operation(client):
    spy = SpyService()
    app.dependency_overrides[get_place_service] = lambda: spy

    res = await client.post("/api/places", json={"title": "A"})
    patch = await client.patch("/api/places/p1", json={"description": "ab"})

    assert res.status_code == 422
    assert patch.status_code == 422
    assert spy.calls == []


async def test_invalid_user_payload_never_reaches_operation(client):
    spy = SpyService()
    app.dependency_overrides[get_user_service] = lambda: spy

    signup = await client.post("/api/users/signup", json={"email": "x"})
    login = await client.post("/api/users/login", json={"password": "x"})

    assert signup.status_code == 422
    assert login.status_code == 422
    assert spy.calls == []


# -- isolated app: handlers without the real routes ---------------------------


@pytest.fixture
def faulty_app():
    test_app = FastAPI()
    register_error_handlers(test_app)

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("secret internal detail")

    @test_app.get("/missing")
    async def missing():
        raise ResourceNotFoundError("user", "u1")

    @test_app.get("/db")
    async def db_down():
        raise DatabaseError("OperationalError")

    return test_app


@pytest.fixture
async def faulty_client(faulty_app):
    # raise_app_exceptions=False: ServerErrorMiddleware re-raises after responding
    async with AsyncClient(
        transport=ASGITransport(app=faulty_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unclassified_fault_returns_generic_500(faulty_client):
    res = await faulty_client.get("/boom")

    assert res.status_code == 500
    assert res.json() == {"message": "An unknown error occurred!"}
    assert "secret" not in res.text


async def test_domain_error_passes_status_and_message_through(faulty_client):
    res = await faulty_client.get("/missing")

    assert res.status_code == 404
    assert res.json() == {"message": "Could not find a user for the provided id."}


async def test_database_error_returns_503(faulty_client):
    res = await faulty_client.get("/db")

    assert res.status_code == 503
    assert set(res.json()) == {"message"}
