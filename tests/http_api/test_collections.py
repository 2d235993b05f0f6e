# tests/http_api/test_collections.py

from tests.helpers import API_PREFIX, create_thread


def test_create_collection_drops_unknown_ids(client, auth_headers) -> None:
    t1 = create_thread(client, auth_headers, title="One")
    t2 = create_thread(client, auth_headers, title="Two")

    resp = client.post(
        f"{API_PREFIX}/collections",
        json={"name": "Favourites", "threadIds": [t1["id"], t2["id"], t2["id"], 9999]},
        headers=auth_headers,
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Favourites"
    assert sorted(t["id"] for t in body["threads"]) == sorted([t1["id"], t2["id"]])


def test_list_collections(client, auth_headers, other_headers) -> None:
    client.post(
        f"{API_PREFIX}/collections",
        json={"name": "Empty", "threadIds": []},
        headers=auth_headers,
    )

    mine = client.get(f"{API_PREFIX}/collections", headers=auth_headers).json()
    theirs = client.get(f"{API_PREFIX}/collections", headers=other_headers).json()

    assert [c["name"] for c in mine] == ["Empty"]
    assert theirs == []
