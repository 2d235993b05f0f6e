# threadspire_api/services/collections_service.py

from __future__ import annotations

from typing import List, Sequence

from sqlalchemy.orm import Session

from threadspire_api.db.session import atomic
from threadspire_api.logging import get_logger
from threadspire_api.repositories import CollectionsRepository, ThreadsRepository, UsersRepository
from threadspire_api.schemas.collections import CollectionCreate, CollectionRead

from .errors import NotFoundError

logger = get_logger(__name__)


class CollectionsService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UsersRepository(session)
        self._threads = ThreadsRepository(session)
        self._collections = CollectionsRepository(session)

    def create_collection(self, user_id: int, payload: CollectionCreate) -> CollectionRead:
        """
        Create a collection holding the existing threads among
        ``payload.thread_ids``. Unknown ids are dropped without error and
        repeated ids collapse.
        """
        with atomic(self._session):
            user = self._users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            threads = self._threads.get_many(payload.thread_ids)
            collection = self._collections.create(
                user=user,
                name=payload.name,
                threads=threads,
            )

        dropped = _missing_ids(payload.thread_ids, [t.id for t in threads])
        logger.info(
            "collection_created",
            collection_id=collection.id,
            user_id=user_id,
            threads=len(collection.threads),
            dropped_thread_ids=dropped,
        )
        return CollectionRead.model_validate(collection)

    def list_collections(self, user_id: int) -> List[CollectionRead]:
        return [
            CollectionRead.model_validate(c)
            for c in self._collections.list_for_user(user_id)
        ]


def _missing_ids(requested: Sequence[int], found: Sequence[int]) -> List[int]:
    return sorted(set(requested) - set(found))
