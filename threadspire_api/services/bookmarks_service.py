# threadspire_api/services/bookmarks_service.py

from __future__ import annotations

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threadspire_api.db.session import atomic
from threadspire_api.logging import get_logger
from threadspire_api.repositories import BookmarksRepository, ThreadsRepository, UsersRepository
from threadspire_api.schemas.bookmarks import BookmarkRead

from .errors import NotFoundError

logger = get_logger(__name__)


class BookmarksService:
    """
    Private bookmarks of threads. Bookmarking the same thread twice is a
    no-op that returns the existing bookmark.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UsersRepository(session)
        self._threads = ThreadsRepository(session)
        self._bookmarks = BookmarksRepository(session)

    def add_bookmark(self, user_id: int, thread_id: int) -> BookmarkRead:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        thread = self._threads.get_by_id(thread_id)
        if thread is None:
            raise NotFoundError("Thread", thread_id)

        existing = self._bookmarks.get_for_user_and_thread(user.id, thread.id)
        if existing is not None:
            return BookmarkRead.model_validate(existing)

        try:
            with atomic(self._session):
                bookmark = self._bookmarks.create(user=user, thread=thread, is_private=True)
        except IntegrityError:
            # Lost a race with an identical insert; the winner's row is the answer.
            bookmark = self._bookmarks.get_for_user_and_thread(user.id, thread.id)
            if bookmark is None:
                raise

        logger.info(
            "bookmark_added",
            bookmark_id=bookmark.id,
            user_id=user.id,
            thread_id=thread.id,
        )
        return BookmarkRead.model_validate(bookmark)

    def list_bookmarks(self, user_id: int) -> List[BookmarkRead]:
        if self._users.get_by_id(user_id) is None:
            raise NotFoundError("User", user_id)
        return [
            BookmarkRead.model_validate(b)
            for b in self._bookmarks.list_for_user(user_id)
        ]
