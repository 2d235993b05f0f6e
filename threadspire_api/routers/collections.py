# threadspire_api/routers/collections.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from threadspire_api.db import models
from threadspire_api.dependencies import get_collections_service, get_current_user
from threadspire_api.schemas.collections import CollectionCreate, CollectionRead
from threadspire_api.services import CollectionsService

router = APIRouter(prefix="/collections", tags=["collections"])


@router.post(
    "",
    response_model=CollectionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a collection",
    description="Thread ids that do not exist are ignored; repeated ids count once.",
)
def create_collection(
    *,
    payload: CollectionCreate,
    user: models.User = Depends(get_current_user),
    service: CollectionsService = Depends(get_collections_service),
) -> CollectionRead:
    return service.create_collection(user.id, payload)


@router.get(
    "",
    response_model=List[CollectionRead],
    summary="List my collections",
)
def list_collections(
    *,
    user: models.User = Depends(get_current_user),
    service: CollectionsService = Depends(get_collections_service),
) -> List[CollectionRead]:
    return service.list_collections(user.id)
