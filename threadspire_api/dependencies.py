# threadspire_api/dependencies.py

"""
FastAPI dependencies shared by the routers: request-scoped services and
the authenticated principal.

Keeping the factories in one place makes it easy to swap implementations in
tests via ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from threadspire_api.db import models
from threadspire_api.db.session import get_session
from threadspire_api.services import (
    AnalyticsService,
    AuthenticationError,
    AuthService,
    BookmarksService,
    CollectionsService,
    ForksService,
    ReactionsService,
    ThreadsService,
)

# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session)


def get_threads_service(session: Session = Depends(get_session)) -> ThreadsService:
    return ThreadsService(session)


def get_forks_service(session: Session = Depends(get_session)) -> ForksService:
    return ForksService(session)


def get_reactions_service(session: Session = Depends(get_session)) -> ReactionsService:
    return ReactionsService(session)


def get_bookmarks_service(session: Session = Depends(get_session)) -> BookmarksService:
    return BookmarksService(session)


def get_collections_service(
    session: Session = Depends(get_session),
) -> CollectionsService:
    return CollectionsService(session)


def get_analytics_service() -> AnalyticsService:
    return AnalyticsService()


# -----------------------------------------------------------------------------
# Security: bearer token
# -----------------------------------------------------------------------------
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> models.User:
    """
    Resolve the acting user from ``Authorization: Bearer <token>``.

    The acting user is always the token's subject; client-supplied user ids
    are never trusted for writes.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token.")

    user = auth.resolve_token(credentials.credentials)
    structlog.contextvars.bind_contextvars(user_id=user.id)
    return user


__all__ = [
    "bearer_scheme",
    "get_current_user",
    "get_auth_service",
    "get_threads_service",
    "get_forks_service",
    "get_reactions_service",
    "get_bookmarks_service",
    "get_collections_service",
    "get_analytics_service",
]
