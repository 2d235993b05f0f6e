# threadspire_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from threadspire_api.config import get_config

from .models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """
    Create an engine for ``url``.

    SQLite needs ``check_same_thread=False`` when used from a threaded web
    server; in-memory SQLite also needs a single shared connection or every
    session would see its own empty database.
    """
    connect_args: Dict[str, Any] = {}
    kwargs: Dict[str, Any] = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool

    return create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        **kwargs,
    )


config = get_config()

engine = build_engine(config.DATABASE_URL, echo=config.DEBUG)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    class_=Session,
)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.
    """
    Base.metadata.create_all(bind=bind or engine)


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_session() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is
    closed afterwards. Services commit explicitly.

        @router.get("/threads")
        def list_threads(db: Session = Depends(get_session)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def db_session() -> Generator[Session, None, None]:
    """
    Context manager for non-FastAPI usage, e.g. scripts:

        with db_session() as db:
            ...
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Generator[Session, None, None]:
    """
    Run a block of writes on an existing session as one transaction:
    commit on success, roll back everything on any exception.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "build_engine",
    "init_db",
    "get_session",
    "db_session",
    "atomic",
]
