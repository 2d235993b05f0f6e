# threadspire_api/routers/bookmarks.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from threadspire_api.db import models
from threadspire_api.dependencies import get_bookmarks_service, get_current_user
from threadspire_api.schemas.bookmarks import BookmarkCreate, BookmarkRead
from threadspire_api.schemas.common import ErrorResponse
from threadspire_api.services import BookmarksService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.post(
    "",
    response_model=BookmarkRead,
    status_code=status.HTTP_201_CREATED,
    summary="Bookmark a thread",
    description="Bookmarks are private. Bookmarking the same thread again returns the existing bookmark.",
    responses={404: {"model": ErrorResponse}},
)
def add_bookmark(
    *,
    payload: BookmarkCreate,
    user: models.User = Depends(get_current_user),
    service: BookmarksService = Depends(get_bookmarks_service),
) -> BookmarkRead:
    return service.add_bookmark(user.id, payload.thread_id)


@router.get(
    "",
    response_model=List[BookmarkRead],
    summary="List my bookmarks",
)
def list_bookmarks(
    *,
    user: models.User = Depends(get_current_user),
    service: BookmarksService = Depends(get_bookmarks_service),
) -> List[BookmarkRead]:
    return service.list_bookmarks(user.id)
