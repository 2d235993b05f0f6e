# tests/services/test_collections_service.py

import pytest

from threadspire_api.schemas.collections import CollectionCreate
from threadspire_api.services import CollectionsService, NotFoundError

from tests.helpers import make_thread


def test_unknown_and_repeated_ids_are_dropped(db_session, alice):
    t1 = make_thread(db_session, alice.id, title="One")
    t2 = make_thread(db_session, alice.id, title="Two")

    collection = CollectionsService(db_session).create_collection(
        alice.id,
        CollectionCreate(name="Reading list", thread_ids=[t1.id, t2.id, t2.id, 999]),
    )

    assert collection.name == "Reading list"
    assert collection.user_id == alice.id
    assert sorted(t.id for t in collection.threads) == sorted([t1.id, t2.id])


def test_collection_may_be_empty(db_session, alice):
    collection = CollectionsService(db_session).create_collection(
        alice.id, CollectionCreate(name="Later", thread_ids=[])
    )

    assert collection.threads == []


def test_collection_unknown_user(db_session):
    with pytest.raises(NotFoundError):
        CollectionsService(db_session).create_collection(
            999, CollectionCreate(name="Nope", thread_ids=[])
        )


def test_list_collections_is_per_user(db_session, alice, bob):
    thread = make_thread(db_session, alice.id)
    service = CollectionsService(db_session)
    service.create_collection(alice.id, CollectionCreate(name="Mine", thread_ids=[thread.id]))
    service.create_collection(bob.id, CollectionCreate(name="Bob's", thread_ids=[thread.id]))

    mine = service.list_collections(alice.id)

    assert [c.name for c in mine] == ["Mine"]
    assert [t.id for t in mine[0].threads] == [thread.id]
