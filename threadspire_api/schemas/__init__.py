"""
Top-level export module for HTTP API schemas.
"""

from .analytics import UserAnalytics
from .bookmarks import BookmarkCreate, BookmarkRead
from .collections import CollectionCreate, CollectionRead
from .common import APIModel, ErrorDetail, ErrorResponse
from .reactions import ReactionCreate, ReactionRead
from .threads import ForkRequest, PostRead, ThreadCreate, ThreadRead, ThreadSummary
from .users import LoginRequest, Token, UserCreate, UserRead

__all__ = [
    # Common
    "APIModel", "ErrorDetail", "ErrorResponse",

    # Users / auth
    "UserCreate", "UserRead", "LoginRequest", "Token",

    # Threads
    "ThreadCreate", "ThreadRead", "ThreadSummary", "PostRead", "ForkRequest",

    # Reactions / bookmarks / collections
    "ReactionCreate", "ReactionRead",
    "BookmarkCreate", "BookmarkRead",
    "CollectionCreate", "CollectionRead",

    # Analytics
    "UserAnalytics",
]
