# threadspire_api/services/forks_service.py

from __future__ import annotations

from sqlalchemy.orm import Session

from threadspire_api.db.models import TITLE_MAX_LENGTH
from threadspire_api.db.session import atomic
from threadspire_api.logging import get_logger
from threadspire_api.repositories import ForksRepository, ThreadsRepository, UsersRepository
from threadspire_api.schemas.threads import ForkRequest, ThreadRead

from .errors import NotFoundError

logger = get_logger(__name__)

FORK_TITLE_SUFFIX = " (Fork)"


def fork_title(title: str) -> str:
    """
    Title of a fork of ``title``: the suffix is always kept, the original
    part is cut so the result fits the title column.
    """
    head = title[: TITLE_MAX_LENGTH - len(FORK_TITLE_SUFFIX)].rstrip()
    return head + FORK_TITLE_SUFFIX


class ForksService:
    """
    Fork an existing thread into a new, unpublished thread owned by the
    acting user.

    Posts are copied (new rows, same content and positions) so the fork can
    never mutate the original's segments; tags are shared rows.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UsersRepository(session)
        self._threads = ThreadsRepository(session)
        self._forks = ForksRepository(session)

    def fork_thread(self, user_id: int, payload: ForkRequest) -> ThreadRead:
        with atomic(self._session):
            user = self._users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            original = self._threads.get_by_id(payload.thread_id)
            if original is None:
                raise NotFoundError("Thread", payload.thread_id)

            forked = self._threads.create(
                user=user,
                title=fork_title(original.title),
                published=False,
            )
            self._threads.add_posts(forked, [p.content for p in original.posts])
            self._threads.set_tags(forked, original.tags)

            self._forks.create(user=user, original=original, forked=forked)
            self._threads.increment_fork_count(original.id)

        if payload.title or payload.edited_segments or payload.comment:
            # Edits are not applied; the fork is a snapshot.
            logger.info(
                "fork_edits_ignored",
                thread_id=original.id,
                has_title=bool(payload.title),
                edited_segments=len(payload.edited_segments or []),
                has_comment=bool(payload.comment),
            )

        logger.info(
            "thread_forked",
            original_thread_id=original.id,
            forked_thread_id=forked.id,
            user_id=user_id,
            fork_count=original.fork_count,
        )
        return ThreadRead.model_validate(forked)
