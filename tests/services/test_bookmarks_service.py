# tests/services/test_bookmarks_service.py

import pytest
from sqlalchemy import func, select

from threadspire_api.db import models
from threadspire_api.services import BookmarksService, NotFoundError

from tests.helpers import make_thread


def test_bookmark_is_private_by_default(db_session, alice, bob):
    thread = make_thread(db_session, alice.id)

    bookmark = BookmarksService(db_session).add_bookmark(bob.id, thread.id)

    assert bookmark.is_private is True
    assert bookmark.user_id == bob.id
    assert bookmark.thread_id == thread.id


def test_bookmarking_twice_returns_existing(db_session, alice, bob):
    thread = make_thread(db_session, alice.id)
    service = BookmarksService(db_session)

    first = service.add_bookmark(bob.id, thread.id)
    second = service.add_bookmark(bob.id, thread.id)

    assert first.id == second.id
    count = db_session.execute(select(func.count()).select_from(models.Bookmark)).scalar_one()
    assert count == 1


def test_list_bookmarks_is_per_user(db_session, alice, bob):
    one = make_thread(db_session, alice.id, title="One")
    two = make_thread(db_session, alice.id, title="Two")
    service = BookmarksService(db_session)
    service.add_bookmark(bob.id, one.id)
    service.add_bookmark(bob.id, two.id)
    service.add_bookmark(alice.id, one.id)

    assert [b.thread_id for b in service.list_bookmarks(bob.id)] == [one.id, two.id]
    assert [b.thread_id for b in service.list_bookmarks(alice.id)] == [one.id]


def test_bookmark_unknown_thread(db_session, bob):
    with pytest.raises(NotFoundError):
        BookmarksService(db_session).add_bookmark(bob.id, 999)


def test_list_bookmarks_unknown_user(db_session):
    with pytest.raises(NotFoundError):
        BookmarksService(db_session).list_bookmarks(999)
