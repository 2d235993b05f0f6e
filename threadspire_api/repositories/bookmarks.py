# threadspire_api/repositories/bookmarks.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class BookmarksRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_for_user_and_thread(
        self,
        user_id: int,
        thread_id: int,
    ) -> Optional[models.Bookmark]:
        stmt = select(models.Bookmark).where(
            models.Bookmark.user_id == user_id,
            models.Bookmark.thread_id == thread_id,
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def list_for_user(self, user_id: int) -> List[models.Bookmark]:
        stmt = (
            select(models.Bookmark)
            .where(models.Bookmark.user_id == user_id)
            .order_by(models.Bookmark.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def create(
        self,
        *,
        user: models.User,
        thread: models.Thread,
        is_private: bool = True,
    ) -> models.Bookmark:
        bookmark = models.Bookmark(user=user, thread=thread, is_private=is_private)
        self.session.add(bookmark)
        self.session.flush()
        return bookmark
