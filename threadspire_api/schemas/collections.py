"""
threadspire_api/schemas/collections.py

A collection is a user-named set of threads. Thread ids that do not exist
are dropped on create; duplicates collapse.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import Field

from .common import APIModel
from .threads import ThreadSummary


class CollectionCreate(APIModel):
    name: str = Field(..., min_length=1, max_length=255)
    thread_ids: List[int] = Field(default_factory=list)


class CollectionRead(APIModel):
    id: int
    name: str
    user_id: int
    created_at: datetime
    threads: List[ThreadSummary] = Field(default_factory=list)


__all__ = ["CollectionCreate", "CollectionRead"]
