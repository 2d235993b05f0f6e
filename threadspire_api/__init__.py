"""
threadspire_api
---------------

HTTP API for Threadspire: multi-segment threads with tags, bookmarks,
collections, forks and per-segment reactions.

The ASGI application lives in ``threadspire_api.main``
(``uvicorn threadspire_api.main:app``); ``create_app()`` is the factory.
"""

from importlib import metadata as _metadata

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

try:
    __version__: str = _metadata.version("threadspire-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
