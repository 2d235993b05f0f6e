# threadspire_api/routers/reactions.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from threadspire_api.db import models
from threadspire_api.dependencies import get_current_user, get_reactions_service
from threadspire_api.schemas.common import ErrorResponse
from threadspire_api.schemas.reactions import ReactionCreate, ReactionRead
from threadspire_api.services import ReactionsService

router = APIRouter(prefix="/reactions", tags=["reactions"])


@router.post(
    "",
    response_model=ReactionRead,
    status_code=status.HTTP_201_CREATED,
    summary="React to a post",
    description="At most one reaction per user and post; a second one is a conflict.",
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def add_reaction(
    *,
    payload: ReactionCreate,
    user: models.User = Depends(get_current_user),
    service: ReactionsService = Depends(get_reactions_service),
) -> ReactionRead:
    return service.add_reaction(user.id, payload)


@router.get(
    "",
    response_model=List[ReactionRead],
    summary="List reactions",
)
def list_reactions(
    *,
    _user: models.User = Depends(get_current_user),
    service: ReactionsService = Depends(get_reactions_service),
) -> List[ReactionRead]:
    return service.list_reactions()
