# threadspire_api/routers/auth.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from threadspire_api.db import models
from threadspire_api.dependencies import get_auth_service, get_current_user
from threadspire_api.schemas.common import ErrorResponse
from threadspire_api.schemas.users import LoginRequest, Token, UserCreate, UserRead
from threadspire_api.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="Create an account. The password is stored as a one-way hash and never returned.",
    responses={409: {"model": ErrorResponse}},
)
def register(
    *,
    payload: UserCreate,
    service: AuthService = Depends(get_auth_service),
) -> UserRead:
    return service.register(payload)


@router.post(
    "/login",
    response_model=Token,
    summary="Log in",
    description="Exchange e-mail and password for a bearer token.",
    responses={401: {"model": ErrorResponse}},
)
def login(
    *,
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Token:
    return service.login(payload)


@router.get(
    "/me",
    response_model=UserRead,
    summary="Current user",
    responses={401: {"model": ErrorResponse}},
)
def me(user: models.User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(user)
