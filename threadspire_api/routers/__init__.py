from . import analytics, auth, bookmarks, collections, forks, reactions, threads

__all__ = [
    "analytics",
    "auth",
    "bookmarks",
    "collections",
    "forks",
    "reactions",
    "threads",
]
