# threadspire_api/repositories/forks.py

from __future__ import annotations

from sqlalchemy.orm import Session

from ..db import models


class ForksRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def create(
        self,
        *,
        user: models.User,
        original: models.Thread,
        forked: models.Thread,
    ) -> models.Fork:
        fork = models.Fork(
            user=user,
            original_thread=original,
            forked_thread=forked,
        )
        self.session.add(fork)
        self.session.flush()
        return fork
