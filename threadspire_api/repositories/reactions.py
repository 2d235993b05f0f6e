# threadspire_api/repositories/reactions.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class ReactionsRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def list_all(self) -> List[models.Reaction]:
        stmt = select(models.Reaction).order_by(models.Reaction.id)
        return list(self.session.execute(stmt).scalars().all())

    def get_for_user_and_post(
        self,
        user_id: int,
        post_id: int,
    ) -> Optional[models.Reaction]:
        stmt = select(models.Reaction).where(
            models.Reaction.user_id == user_id,
            models.Reaction.post_id == post_id,
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def create(
        self,
        *,
        user: models.User,
        post: models.Post,
        reaction_type: models.ReactionType,
    ) -> models.Reaction:
        """
        Insert a reaction. Raises ``IntegrityError`` on flush if the
        (user, post) pair already exists.
        """
        reaction = models.Reaction(user=user, post=post, type=reaction_type)
        self.session.add(reaction)
        self.session.flush()
        return reaction
