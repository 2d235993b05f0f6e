"""
threadspire_api/schemas/reactions.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, cast

from pydantic import Field, model_validator

from threadspire_api.db.models import ReactionType

from .common import APIModel


class ReactionCreate(APIModel):
    """
    Payload for reacting to a post.

    The kind can be given either as ``type`` (``"fire"``) or as the
    ``emoji`` symbol (``"🔥"``); when both are given they must agree.
    """

    post_id: int
    type: Optional[ReactionType] = None
    emoji: Optional[str] = None

    @model_validator(mode="after")
    def _resolve_kind(self) -> "ReactionCreate":
        from_emoji: Optional[ReactionType] = None
        if self.emoji:
            from_emoji = ReactionType.from_symbol(self.emoji)

        if self.type is None and from_emoji is None:
            raise ValueError("Either 'type' or 'emoji' is required.")
        if self.type is not None and from_emoji is not None and self.type != from_emoji:
            raise ValueError("'type' and 'emoji' refer to different reactions.")

        if self.type is None:
            self.type = from_emoji
        return self

    @property
    def kind(self) -> ReactionType:
        return cast(ReactionType, self.type)


class ReactionRead(APIModel):
    id: int
    type: ReactionType
    user_id: int
    post_id: int
    created_at: datetime
    symbol: str = Field(default="", description="Emoji for the reaction type.")

    @model_validator(mode="after")
    def _fill_symbol(self) -> "ReactionRead":
        self.symbol = self.type.symbol
        return self


__all__ = ["ReactionCreate", "ReactionRead"]
