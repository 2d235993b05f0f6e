# threadspire_api/services/reactions_service.py

from __future__ import annotations

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threadspire_api.db.session import atomic
from threadspire_api.logging import get_logger
from threadspire_api.repositories import ReactionsRepository, ThreadsRepository, UsersRepository
from threadspire_api.schemas.reactions import ReactionCreate, ReactionRead

from .errors import ConflictError, NotFoundError

logger = get_logger(__name__)


class ReactionsService:
    """
    Reactions on individual posts, at most one per (user, post).

    The pre-check gives a friendly error in the common case; the unique
    constraint on ``reactions`` turns a concurrent duplicate into the same
    ``ConflictError``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UsersRepository(session)
        self._threads = ThreadsRepository(session)
        self._reactions = ReactionsRepository(session)

    def add_reaction(self, user_id: int, payload: ReactionCreate) -> ReactionRead:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        post = self._threads.get_post(payload.post_id)
        if post is None:
            raise NotFoundError("Post", payload.post_id)

        if self._reactions.get_for_user_and_post(user.id, post.id) is not None:
            raise self._conflict(user.id, post.id)

        try:
            with atomic(self._session):
                reaction = self._reactions.create(
                    user=user,
                    post=post,
                    reaction_type=payload.kind,
                )
        except IntegrityError as exc:
            raise self._conflict(user.id, post.id) from exc

        logger.info(
            "reaction_added",
            reaction_id=reaction.id,
            user_id=user.id,
            post_id=post.id,
            type=reaction.type.value,
        )
        return ReactionRead.model_validate(reaction)

    def list_reactions(self) -> List[ReactionRead]:
        return [ReactionRead.model_validate(r) for r in self._reactions.list_all()]

    @staticmethod
    def _conflict(user_id: int, post_id: int) -> ConflictError:
        return ConflictError(
            "User has already reacted to this post.",
            details={"user_id": user_id, "post_id": post_id},
        )
