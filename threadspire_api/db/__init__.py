"""
threadspire_api.db
==================

Database package for the Threadspire API.

Public DB primitives can be imported from a single place:

    from threadspire_api.db import Base, engine, SessionLocal, get_session
"""

from .models import Base
from .session import SessionLocal, atomic, db_session, engine, get_session, init_db

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_session",
    "db_session",
    "init_db",
    "atomic",
]
