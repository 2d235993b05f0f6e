# tests/http_api/test_forks.py

from tests.helpers import API_PREFIX, create_thread


def test_fork_thread(client, auth_headers, other_headers) -> None:
    original = create_thread(client, auth_headers, title="Origin", tags=["x"])

    resp = client.post(
        f"{API_PREFIX}/forks",
        json={"threadId": original["id"], "comment": "mine now"},
        headers=other_headers,
    )

    assert resp.status_code == 201
    forked = resp.json()
    assert forked["title"] == "Origin (Fork)"
    assert forked["published"] is False
    assert forked["userId"] != original["userId"]
    assert forked["tags"] == ["x"]
    assert [p["content"] for p in forked["posts"]] == [p["content"] for p in original["posts"]]

    refreshed = client.get(f"{API_PREFIX}/threads/{original['id']}", headers=auth_headers)
    assert refreshed.json()["forkCount"] == 1


def test_fork_missing_thread(client, auth_headers) -> None:
    resp = client.post(f"{API_PREFIX}/forks", json={"threadId": 404}, headers=auth_headers)

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "not_found"


def test_fork_requires_token(client) -> None:
    resp = client.post(f"{API_PREFIX}/forks", json={"threadId": 1})

    assert resp.status_code == 401
