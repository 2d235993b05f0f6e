# threadspire_api/repositories/tags.py

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import models


def normalize_tag_name(name: str) -> str:
    """
    Canonical form used for storage and lookup: trimmed and lower-cased.
    """
    return " ".join(name.split()).lower()


class TagsRepository:
    """
    Data-access layer for Tag, including the get-or-create upsert.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_by_name(self, name: str) -> Optional[models.Tag]:
        stmt = select(models.Tag).where(models.Tag.name == name)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_or_create(self, name: str) -> models.Tag:
        """
        Return the Tag called ``name`` (already normalized), creating it if
        needed.

        The insert runs inside a SAVEPOINT: if a concurrent transaction
        created the same name first, the unique constraint fires, only the
        savepoint is rolled back and the winner's row is returned.
        """
        existing = self.get_by_name(name)
        if existing is not None:
            return existing

        try:
            with self.session.begin_nested():
                tag = models.Tag(name=name)
                self.session.add(tag)
                self.session.flush()
            return tag
        except IntegrityError:
            winner = self.get_by_name(name)
            if winner is None:
                raise
            return winner

    def get_or_create_many(self, names: Iterable[str]) -> List[models.Tag]:
        """
        Resolve a list of raw tag names to distinct Tag rows, keeping the
        order of first appearance. Blank names are ignored.
        """
        seen: dict[str, models.Tag] = {}
        for raw in names:
            name = normalize_tag_name(raw)
            if not name or name in seen:
                continue
            seen[name] = self.get_or_create(name)
        return list(seen.values())
