# tests/helpers.py
from threadspire_api.schemas.threads import ThreadCreate
from threadspire_api.schemas.users import UserCreate
from threadspire_api.services import AuthService, ThreadsService

API_PREFIX = "/api"
PASSWORD = "correct-horse-battery"


# ---------------------------------------------------------------------------
# Service-level helpers
# ---------------------------------------------------------------------------


def make_user(session, email="alice@example.com", name="Alice"):
    return AuthService(session).register(
        UserCreate(email=email, password=PASSWORD, name=name)
    )


def make_thread(session, user_id, title="Notes", segments=("one", "two"), tags=None, published=True):
    return ThreadsService(session).create_thread(
        user_id,
        ThreadCreate(title=title, segments=list(segments), tags=tags, published=published),
    )


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


def register_and_login(client, email="alice@example.com", name="Alice"):
    resp = client.post(
        f"{API_PREFIX}/auth/register",
        json={"email": email, "password": PASSWORD, "name": name},
    )
    assert resp.status_code == 201, resp.text

    resp = client.post(
        f"{API_PREFIX}/auth/login",
        json={"email": email, "password": PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


def create_thread(client, headers, title="Notes", segments=("one", "two"), tags=None, published=True):
    resp = client.post(
        f"{API_PREFIX}/threads",
        json={
            "title": title,
            "segments": list(segments),
            "tags": tags,
            "published": published,
        },
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
