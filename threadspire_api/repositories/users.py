# threadspire_api/repositories/users.py

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class UsersRepository:
    """
    Thin data-access layer around the User model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_by_id(self, user_id: int) -> Optional[models.User]:
        return self.session.get(models.User, user_id)

    def get_by_email(self, email: str) -> Optional[models.User]:
        stmt = select(models.User).where(models.User.email == email)
        return self.session.execute(stmt).scalar_one_or_none()

    def create(
        self,
        *,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
    ) -> models.User:
        """
        Create and persist (flush, not commit) a new User.
        """
        user = models.User(email=email, password_hash=password_hash, name=name)
        self.session.add(user)
        self.session.flush()
        return user
