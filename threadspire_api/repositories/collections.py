# threadspire_api/repositories/collections.py

from __future__ import annotations

from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..db import models


class CollectionsRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def list_for_user(self, user_id: int) -> List[models.Collection]:
        stmt = (
            select(models.Collection)
            .options(selectinload(models.Collection.threads))
            .where(models.Collection.user_id == user_id)
            .order_by(models.Collection.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def create(
        self,
        *,
        user: models.User,
        name: str,
        threads: Iterable[models.Thread],
    ) -> models.Collection:
        collection = models.Collection(
            user=user,
            name=name,
            threads=sorted(set(threads), key=lambda t: t.id),
        )
        self.session.add(collection)
        self.session.flush()
        return collection
