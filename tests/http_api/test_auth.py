# tests/http_api/test_auth.py

from tests.helpers import API_PREFIX, PASSWORD


def test_register_does_not_return_password(client) -> None:
    resp = client.post(
        f"{API_PREFIX}/auth/register",
        json={"email": "carol@example.com", "password": PASSWORD, "name": "Carol"},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "carol@example.com"
    assert "createdAt" in body
    assert "password" not in body
    assert "passwordHash" not in body


def test_register_duplicate_email(client, auth_headers) -> None:
    resp = client.post(
        f"{API_PREFIX}/auth/register",
        json={"email": "alice@example.com", "password": PASSWORD, "name": "Again"},
    )

    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "conflict"


def test_register_short_password(client) -> None:
    resp = client.post(
        f"{API_PREFIX}/auth/register",
        json={"email": "dave@example.com", "password": "short"},
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "validation_error"


def test_login_returns_bearer_token(client, auth_headers) -> None:
    resp = client.post(
        f"{API_PREFIX}/auth/login",
        json={"email": "alice@example.com", "password": PASSWORD},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["tokenType"] == "bearer"
    assert body["accessToken"]
    assert body["expiresIn"] > 0


def test_login_wrong_password_envelope(client, auth_headers) -> None:
    resp = client.post(
        f"{API_PREFIX}/auth/login",
        json={"email": "alice@example.com", "password": "not-the-password"},
    )

    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == "Bearer"
    error = resp.json()["error"]
    assert error["code"] == "authentication_failed"
    assert error["message"]


def test_me(client, auth_headers) -> None:
    resp = client.get(f"{API_PREFIX}/auth/me", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json()["email"] == "alice@example.com"


def test_me_without_token(client) -> None:
    resp = client.get(f"{API_PREFIX}/auth/me")

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "authentication_failed"


def test_me_with_garbage_token(client) -> None:
    resp = client.get(f"{API_PREFIX}/auth/me", headers={"Authorization": "Bearer not.a.jwt"})

    assert resp.status_code == 401
