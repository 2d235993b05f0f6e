# threadspire_api/repositories/__init__.py
"""
Repository layer public exports.

Downstream code can import from this module instead of individual files:

    from threadspire_api.repositories import ThreadsRepository
"""

from .bookmarks import BookmarksRepository
from .collections import CollectionsRepository
from .forks import ForksRepository
from .reactions import ReactionsRepository
from .tags import TagsRepository, normalize_tag_name
from .threads import ThreadsRepository
from .users import UsersRepository

__all__ = [
    "BookmarksRepository",
    "CollectionsRepository",
    "ForksRepository",
    "ReactionsRepository",
    "TagsRepository",
    "ThreadsRepository",
    "UsersRepository",
    "normalize_tag_name",
]
