# threadspire_api/repositories/threads.py

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session, selectinload

from ..db import models


class ThreadsRepository:
    """
    Thin data-access layer around the Thread and Post models.

    Posts are only ever written as part of a thread, so they share this
    repository instead of getting their own write path.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.Thread).options(
            selectinload(models.Thread.posts).selectinload(models.Post.reactions),
            selectinload(models.Thread.tags),
        )

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_all(self) -> List[models.Thread]:
        stmt = self._base_select().order_by(models.Thread.id)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_id(self, thread_id: int) -> Optional[models.Thread]:
        return self.session.get(models.Thread, thread_id)

    def get_many(self, ids: Iterable[int]) -> Sequence[models.Thread]:
        """
        Fetch the existing threads among ``ids`` in one query.
        Unknown ids are simply absent from the result.
        """
        ids_list = list(set(ids))
        if not ids_list:
            return []

        stmt = self._base_select().where(models.Thread.id.in_(ids_list))
        return list(self.session.execute(stmt).scalars().all())

    def get_post(self, post_id: int) -> Optional[models.Post]:
        return self.session.get(models.Post, post_id)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        user: models.User,
        title: str,
        published: bool,
    ) -> models.Thread:
        thread = models.Thread(
            user=user,
            title=title,
            published=published,
            fork_count=0,
        )
        self.session.add(thread)
        self.session.flush()
        return thread

    def add_posts(
        self,
        thread: models.Thread,
        contents: Sequence[str],
    ) -> List[models.Post]:
        """
        Append one post per entry in ``contents``, positioned by list index.
        """
        posts = [
            models.Post(content=content, position=position)
            for position, content in enumerate(contents)
        ]
        thread.posts = posts
        self.session.flush()
        return posts

    def set_tags(self, thread: models.Thread, tags: Iterable[models.Tag]) -> None:
        thread.tags = list(tags)
        self.session.flush()

    def increment_fork_count(self, thread_id: int) -> None:
        """
        Atomically bump ``fork_count`` in SQL instead of read-modify-write.
        Loaded Thread instances in the session are synchronized too.
        """
        stmt = (
            update(models.Thread)
            .where(models.Thread.id == thread_id)
            .values(fork_count=models.Thread.fork_count + 1)
            .execution_options(synchronize_session="fetch")
        )
        self.session.execute(stmt)
