"""
threadspire_api/schemas/threads.py

Pydantic models for threads, their posts (segments) and forks.

A thread is returned with its posts ordered by ``position`` and its tags
flattened to their names.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field, field_validator

from threadspire_api.db.models import TAG_NAME_MAX_LENGTH, TITLE_MAX_LENGTH

from .common import APIModel

TagName = Annotated[str, Field(max_length=TAG_NAME_MAX_LENGTH)]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ThreadCreate(APIModel):
    """
    Payload for creating a thread.

    ``segments`` become posts in the given order; ``tags`` are matched to
    existing tags by normalized name and created when missing.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    segments: List[str] = Field(
        ...,
        min_length=1,
        description="Ordered segment texts; position = list index.",
    )
    tags: Optional[List[TagName]] = Field(
        default=None,
        description="Optional tag names. Duplicates collapse to one tag.",
    )
    published: bool = False


class ForkRequest(APIModel):
    """
    Payload for forking a thread.

    ``title``, ``edited_segments`` and ``comment`` are accepted for client
    compatibility but the fork is always a snapshot of the original.
    """

    thread_id: int = Field(..., description="Id of the thread to fork.")
    title: Optional[str] = None
    edited_segments: Optional[List[str]] = None
    comment: Optional[str] = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class PostRead(APIModel):
    id: int
    content: str
    position: int
    reaction_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Number of reactions per reaction type.",
    )


class ThreadSummary(APIModel):
    """
    Compact representation used when threads are nested in other resources.
    """

    id: int
    title: str
    published: bool
    fork_count: int
    user_id: int


class ThreadRead(ThreadSummary):
    created_at: datetime
    updated_at: datetime
    posts: List[PostRead] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("posts", mode="before")
    @classmethod
    def _order_posts(cls, value: Any) -> Any:
        if value is None:
            return []
        return sorted(value, key=lambda p: p["position"] if isinstance(p, dict) else p.position)

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_names(cls, value: Any) -> Any:
        if value is None:
            return []
        return sorted(getattr(t, "name", t) for t in value)


__all__ = [
    "ThreadCreate",
    "ForkRequest",
    "PostRead",
    "ThreadSummary",
    "ThreadRead",
]
