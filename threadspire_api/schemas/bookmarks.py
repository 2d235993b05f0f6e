"""
threadspire_api/schemas/bookmarks.py
"""

from __future__ import annotations

from datetime import datetime

from .common import APIModel


class BookmarkCreate(APIModel):
    thread_id: int


class BookmarkRead(APIModel):
    id: int
    is_private: bool
    user_id: int
    thread_id: int
    created_at: datetime


__all__ = ["BookmarkCreate", "BookmarkRead"]
