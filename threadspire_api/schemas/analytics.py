"""
threadspire_api/schemas/analytics.py
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .common import APIModel


class UserAnalytics(APIModel):
    """
    Per-user dashboard summary. Keys are serialized in camelCase
    (``threadsCreated``, ``activityGraph``, ...).
    """

    threads_created: int
    bookmarks_received: int
    reactions: Dict[str, int] = Field(
        default_factory=dict,
        description="Reaction symbol -> count.",
    )
    most_forked_thread: str
    activity_graph: List[int] = Field(default_factory=list)


__all__ = ["UserAnalytics"]
