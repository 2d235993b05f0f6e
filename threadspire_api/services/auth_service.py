# threadspire_api/services/auth_service.py

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threadspire_api.config import get_config
from threadspire_api.db import models
from threadspire_api.db.session import atomic
from threadspire_api.logging import get_logger
from threadspire_api.repositories import UsersRepository
from threadspire_api.schemas.users import LoginRequest, Token, UserCreate, UserRead

from .errors import AuthenticationError, ConflictError
from .security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = get_logger(__name__)


class AuthService:
    """
    Registration, login and bearer-token resolution.

    Responsibilities:
    - Enforce e-mail uniqueness.
    - Store only Argon2 password hashes.
    - Map tokens back to persisted users.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UsersRepository(session)

    def register(self, payload: UserCreate) -> UserRead:
        email = payload.email.lower()
        if self._users.get_by_email(email) is not None:
            raise ConflictError(
                f"A user with email '{email}' already exists.",
                details={"email": email},
            )

        try:
            with atomic(self._session):
                user = self._users.create(
                    email=email,
                    password_hash=hash_password(payload.password),
                    name=payload.name,
                )
        except IntegrityError as exc:
            raise ConflictError(
                f"A user with email '{email}' already exists.",
                details={"email": email},
            ) from exc

        logger.info("user_registered", user_id=user.id)
        return UserRead.model_validate(user)

    def authenticate(self, email: str, password: str) -> models.User:
        user = self._users.get_by_email(email.lower())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("login_failed")
            raise AuthenticationError("Invalid email or password.")
        return user

    def login(self, payload: LoginRequest) -> Token:
        user = self.authenticate(payload.email, payload.password)
        logger.info("login_succeeded", user_id=user.id)
        return self.issue_token(user)

    def issue_token(self, user: models.User) -> Token:
        settings = get_config()
        return Token(
            access_token=create_access_token(user.id, settings=settings),
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )

    def resolve_token(self, token: str) -> models.User:
        """
        Return the user a bearer token was issued for.
        """
        user_id = decode_access_token(token)
        user = self._users.get_by_id(user_id)
        if user is None:
            raise AuthenticationError("Token refers to an unknown user.")
        return user
