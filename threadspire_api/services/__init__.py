"""
threadspire_api.services
------------------------

Service layer aggregation for the Threadspire API.

Routers and other callers should import service classes from this package
instead of depending directly on repositories:

    from threadspire_api.services import ThreadsService, NotFoundError
"""

from .analytics_service import AnalyticsService
from .auth_service import AuthService
from .bookmarks_service import BookmarksService
from .collections_service import CollectionsService
from .errors import AuthenticationError, ConflictError, NotFoundError, ThreadspireError
from .forks_service import ForksService
from .reactions_service import ReactionsService
from .threads_service import ThreadsService

__all__ = [
    "AnalyticsService",
    "AuthService",
    "BookmarksService",
    "CollectionsService",
    "ForksService",
    "ReactionsService",
    "ThreadsService",
    "ThreadspireError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
