"""User Routes - signup, login and listing through the HTTP pipeline.

Invariants:
    - Duplicate signup -> 409 and the existing record is unchanged
    - Wrong password and unknown email produce identical 401 responses
    - Password hashes never appear in any response
"""

INVALID_CREDENTIALS = {"message": "Invalid credentials, could not log you in."}


async def test_signup_returns_201_with_user(client):
    res = await client.post("/api/users/signup", json={
        "name": "Max", "email": "Max@Example.com", "password": "secret-pass",
    })

    assert res.status_code == 201
    user = res.json()["user"]
    assert user["name"] == "Max"
    assert user["email"] == "max@example.com"
    assert user["places"] == []
    assert "password" not in user
    assert "password_hash" not in user


async def test_signup_stores_hashed_password(client, user_repo, signed_up_user):
    stored = await user_repo.get(signed_up_user["id"])
    assert stored.password_hash != "secret-pass"
    assert stored.password_hash.startswith("pbkdf2_sha256$")


async def test_duplicate_signup_returns_409_without_mutating_user(
    client, signed_up_user,
):
    before = (await client.get("/api/users")).json()

    res = await client.post("/api/users/signup", json={
        "name": "Impostor", "email": "max@example.com", "password": "other-pass",
    })

    assert res.status_code == 409
    assert res.json() == {"message": "User exists already, please login instead."}
    after = (await client.get("/api/users")).json()
    assert after == before

    login = await client.post("/api/users/login", json={
        "email": "max@example.com", "password": "secret-pass",
    })
    assert login.status_code == 200


async def test_signup_validation_failures_return_422(client):
    for payload in (
        {"name": "", "email": "a@b.com", "password": "secret-pass"},
        {"name": "Max", "email": "not-an-email", "password": "secret-pass"},
        {"name": "Max", "email": "a@b.com", "password": "12345"},
        {"email": "a@b.com", "password": "secret-pass"},
    ):
        res = await client.post("/api/users/signup", json=payload)
        assert res.status_code == 422, payload
        assert res.json() == {
            "message": "Invalid inputs passed, please check your data.",
        }

    users = (await client.get("/api/users")).json()
    assert users == {"users": []}


async def test_login_success(client, signed_up_user):
    res = await client.post("/api/users/login", json={
        "email": "max@example.com", "password": "secret-pass",
    })

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Logged in!"
    assert body["user"]["id"] == signed_up_user["id"]


async def test_login_email_is_case_insensitive(client, signed_up_user):
    res = await client.post("/api/users/login", json={
        "email": "MAX@example.com", "password": "secret-pass",
    })
    assert res.status_code == 200


async def test_login_failures_are_indistinguishable(client, signed_up_user):
    wrong_password = await client.post("/api/users/login", json={
        "email": "max@example.com", "password": "wrong-pass",
    })
    unknown_email = await client.post("/api/users/login", json={
        "email": "nobody@example.com", "password": "secret-pass",
    })

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.content == unknown_email.content
    assert wrong_password.json() == INVALID_CREDENTIALS


async def test_login_validation_failure_returns_422(client):
    res = await client.post("/api/users/login", json={
        "email": "max@example.com", "password": "",
    })
    assert res.status_code == 422


async def test_list_users(client, signed_up_user):
    res = await client.get("/api/users")

    assert res.status_code == 200
    assert res.json() == {"users": [signed_up_user]}
