"""User Service - signup uniqueness, hashed storage and enumeration-safe login."""

import asyncio

import pytest

from placeshare.core.errors import InvalidCredentialsError, UserExistsError
from placeshare.core.passwords import verify_password
from placeshare.core.result import Err, Ok
from placeshare.services.user_service import UserService


@pytest.fixture
def service(user_repo):
    return UserService(user_repo, hash_iterations=1000)


async def test_signup_creates_user_with_hashed_password(service, user_repo):
    result = await service.signup("Max", "max@example.com", "secret-pass")

    assert isinstance(result, Ok)
    stored = await user_repo.get(result.value.id)
    assert stored.places == []
    assert stored.password_hash != "secret-pass"
    assert verify_password("secret-pass", stored.password_hash)


async def test_signup_duplicate_email_is_rejected(service, user_repo):
    first = (await service.signup("Max", "max@example.com", "secret-pass")).value

    result = await service.signup("Other", "max@example.com", "another-pass")

    assert isinstance(result, Err)
    assert isinstance(result.error, UserExistsError)
    assert result.error.http_status == 409
    assert await user_repo.list_all() == [first]


async def test_concurrent_signups_for_one_email_store_one_user(service, user_repo):
    results = await asyncio.gather(
        service.signup("A", "dup@example.com", "secret-pass"),
        service.signup("B", "dup@example.com", "secret-pass"),
    )

    assert sorted(type(r).__name__ for r in results) == ["Err", "Ok"]
    rejected = next(r for r in results if isinstance(r, Err))
    assert isinstance(rejected.error, UserExistsError)
    stored = await user_repo.list_all()
    assert [u.email for u in stored] == ["dup@example.com"]


async def test_list_users(service):
    await service.signup("Max", "max@example.com", "secret-pass")
    await service.signup("Manu", "manu@example.com", "secret-pass")

    result = await service.list_users()

    assert [u.name for u in result.value] == ["Max", "Manu"]


async def test_login_success(service):
    user = (await service.signup("Max", "max@example.com", "secret-pass")).value

    result = await service.login("max@example.com", "secret-pass")

    assert result == Ok(user)


async def test_login_wrong_password_and_unknown_email_match(service):
    await service.signup("Max", "max@example.com", "secret-pass")

    wrong_password = await service.login("max@example.com", "nope-nope")
    unknown_email = await service.login("ghost@example.com", "secret-pass")

    for result in (wrong_password, unknown_email):
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCredentialsError)
    assert wrong_password.error.to_response() == unknown_email.error.to_response()
    assert wrong_password.error.http_status == unknown_email.error.http_status == 401
