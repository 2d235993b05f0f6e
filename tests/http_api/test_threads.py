# tests/http_api/test_threads.py

from tests.helpers import API_PREFIX, create_thread


def test_create_thread(client, auth_headers) -> None:
    body = create_thread(client, auth_headers, title="Intro", segments=["a", "b"], tags=["X", "y", "x"])

    assert body["title"] == "Intro"
    assert body["published"] is True
    assert body["forkCount"] == 0
    assert [p["position"] for p in body["posts"]] == [0, 1]
    assert [p["content"] for p in body["posts"]] == ["a", "b"]
    assert body["tags"] == ["x", "y"]
    assert body["posts"][0]["reactionCounts"]["fire"] == 0


def test_author_comes_from_token(client, auth_headers) -> None:
    me = client.get(f"{API_PREFIX}/auth/me", headers=auth_headers).json()

    body = create_thread(client, auth_headers)

    assert body["userId"] == me["id"]


def test_create_thread_requires_token(client) -> None:
    resp = client.post(f"{API_PREFIX}/threads", json={"title": "t", "segments": ["a"]})

    assert resp.status_code == 401


def test_create_thread_without_segments(client, auth_headers) -> None:
    resp = client.post(
        f"{API_PREFIX}/threads",
        json={"title": "t", "segments": []},
        headers=auth_headers,
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["details"]["errors"]


def test_create_thread_rejects_unknown_fields(client, auth_headers) -> None:
    resp = client.post(
        f"{API_PREFIX}/threads",
        json={"title": "t", "segments": ["a"], "userId": 99},
        headers=auth_headers,
    )

    assert resp.status_code == 422


def test_list_and_get_threads(client, auth_headers) -> None:
    first = create_thread(client, auth_headers, title="One")
    second = create_thread(client, auth_headers, title="Two")

    listed = client.get(f"{API_PREFIX}/threads", headers=auth_headers)
    fetched = client.get(f"{API_PREFIX}/threads/{second['id']}", headers=auth_headers)

    assert listed.status_code == 200
    assert [t["id"] for t in listed.json()] == [first["id"], second["id"]]
    assert fetched.status_code == 200
    assert fetched.json()["title"] == "Two"


def test_get_missing_thread_envelope(client, auth_headers) -> None:
    resp = client.get(f"{API_PREFIX}/threads/9999", headers=auth_headers)

    assert resp.status_code == 404
    error = resp.json()["error"]
    assert error["code"] == "not_found"
    assert error["details"] == {"resource": "Thread", "id": 9999}


def test_create_thread_with_overlong_tag(client, auth_headers) -> None:
    resp = client.post(
        f"{API_PREFIX}/threads",
        json={"title": "t", "segments": ["a"], "tags": ["x" * 500]},
        headers=auth_headers,
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "validation_error"
