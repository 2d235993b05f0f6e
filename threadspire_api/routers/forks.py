# threadspire_api/routers/forks.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from threadspire_api.db import models
from threadspire_api.dependencies import get_current_user, get_forks_service
from threadspire_api.schemas.common import ErrorResponse
from threadspire_api.schemas.threads import ForkRequest, ThreadRead
from threadspire_api.services import ForksService

router = APIRouter(prefix="/forks", tags=["forks"])


@router.post(
    "",
    response_model=ThreadRead,
    status_code=status.HTTP_201_CREATED,
    summary="Fork a thread",
    description=(
        "Copy a thread into a new unpublished thread owned by the authenticated "
        "user and bump the original's fork count."
    ),
    responses={404: {"model": ErrorResponse}},
)
def fork_thread(
    *,
    payload: ForkRequest,
    user: models.User = Depends(get_current_user),
    service: ForksService = Depends(get_forks_service),
) -> ThreadRead:
    return service.fork_thread(user.id, payload)
