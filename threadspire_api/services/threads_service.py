# threadspire_api/services/threads_service.py

from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from threadspire_api.db import models
from threadspire_api.db.session import atomic
from threadspire_api.logging import get_logger
from threadspire_api.repositories import TagsRepository, ThreadsRepository, UsersRepository
from threadspire_api.schemas.threads import ThreadCreate, ThreadRead

from .errors import NotFoundError

logger = get_logger(__name__)


class ThreadsService:
    """
    High-level service for creating and reading threads.

    Responsibilities:
    - Resolve the author and fail fast when missing.
    - Persist the thread header, its ordered posts and its tags as one
      transaction.
    - Convert ORM rows to API schemas (``ThreadRead``).
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UsersRepository(session)
        self._threads = ThreadsRepository(session)
        self._tags = TagsRepository(session)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_thread(self, user_id: int, payload: ThreadCreate) -> ThreadRead:
        """
        Create a thread with one post per segment (position = input index)
        and the given tags, creating missing tags on the fly.
        """
        with atomic(self._session):
            user = self._users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            thread = self._threads.create(
                user=user,
                title=payload.title,
                published=payload.published,
            )
            self._threads.add_posts(thread, payload.segments)
            self._threads.set_tags(thread, self._tags.get_or_create_many(payload.tags or []))

        logger.info(
            "thread_created",
            thread_id=thread.id,
            user_id=user_id,
            posts=len(thread.posts),
            tags=[t.name for t in thread.tags],
        )
        return ThreadRead.model_validate(thread)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_threads(self) -> List[ThreadRead]:
        return [ThreadRead.model_validate(t) for t in self._threads.list_all()]

    def get_thread(self, thread_id: int) -> ThreadRead:
        return ThreadRead.model_validate(self.load_thread(thread_id))

    def load_thread(self, thread_id: int) -> models.Thread:
        """
        Return the ORM thread or raise ``NotFoundError``.
        """
        thread = self._threads.get_by_id(thread_id)
        if thread is None:
            raise NotFoundError("Thread", thread_id)
        return thread
