# threadspire_api/routers/threads.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from threadspire_api.db import models
from threadspire_api.dependencies import get_current_user, get_threads_service
from threadspire_api.schemas.common import ErrorResponse
from threadspire_api.schemas.threads import ThreadCreate, ThreadRead
from threadspire_api.services import ThreadsService

router = APIRouter(prefix="/threads", tags=["threads"])


@router.post(
    "",
    response_model=ThreadRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a thread",
    description=(
        "Create a thread owned by the authenticated user. Each segment becomes "
        "a post positioned by its index; tags are created on first use."
    ),
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def create_thread(
    *,
    payload: ThreadCreate,
    user: models.User = Depends(get_current_user),
    service: ThreadsService = Depends(get_threads_service),
) -> ThreadRead:
    return service.create_thread(user.id, payload)


@router.get(
    "",
    response_model=List[ThreadRead],
    summary="List threads",
    description="Return every thread with its posts and tags.",
)
def list_threads(
    *,
    _user: models.User = Depends(get_current_user),
    service: ThreadsService = Depends(get_threads_service),
) -> List[ThreadRead]:
    return service.list_threads()


@router.get(
    "/{thread_id}",
    response_model=ThreadRead,
    summary="Get a single thread",
    responses={404: {"model": ErrorResponse}},
)
def get_thread(
    *,
    thread_id: int,
    _user: models.User = Depends(get_current_user),
    service: ThreadsService = Depends(get_threads_service),
) -> ThreadRead:
    return service.get_thread(thread_id)
