# threadspire_api/db/models.py

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    Mapped,
    declarative_base,
    mapped_column,
    relationship,
)

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


TITLE_MAX_LENGTH = 255
TAG_NAME_MAX_LENGTH = 64


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ReactionType(str, enum.Enum):
    MINDBLOWN = "mindblown"
    LIGHTBULB = "lightbulb"
    CALM = "calm"
    FIRE = "fire"
    HEART = "heart"

    @property
    def symbol(self) -> str:
        return REACTION_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "ReactionType":
        # "❤" and "❤️" differ only by the emoji variation selector.
        wanted = symbol.strip().replace("\ufe0f", "")
        for kind, emoji in REACTION_SYMBOLS.items():
            if emoji.replace("\ufe0f", "") == wanted:
                return kind
        raise ValueError(f"Unknown reaction symbol {symbol!r}")


REACTION_SYMBOLS: Dict[ReactionType, str] = {
    ReactionType.MINDBLOWN: "🤯",
    ReactionType.LIGHTBULB: "💡",
    ReactionType.CALM: "😌",
    ReactionType.FIRE: "🔥",
    ReactionType.HEART: "❤️",
}


# ---------------------------------------------------------------------------
# Association tables
# ---------------------------------------------------------------------------

thread_tags = Table(
    "thread_tags",
    Base.metadata,
    Column("thread_id", ForeignKey("threads.id"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id"), primary_key=True),
)

collection_threads = Table(
    "collection_threads",
    Base.metadata,
    Column("collection_id", ForeignKey("collections.id"), primary_key=True),
    Column("thread_id", ForeignKey("threads.id"), primary_key=True),
)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    """
    A registered author. Only the Argon2 hash of the password is stored.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(
        String(320), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    threads: Mapped[List["Thread"]] = relationship("Thread", back_populates="user")
    bookmarks: Mapped[List["Bookmark"]] = relationship(
        "Bookmark", back_populates="user"
    )
    collections: Mapped[List["Collection"]] = relationship(
        "Collection", back_populates="user"
    )

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r}>"


# ---------------------------------------------------------------------------
# Threads / posts / tags
# ---------------------------------------------------------------------------


class Thread(Base):
    """
    A titled, ordered sequence of posts (segments) written by one user.
    """

    __tablename__ = "threads"
    __table_args__ = (
        CheckConstraint("fork_count >= 0", name="ck_threads_fork_count_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    fork_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="threads")

    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="thread",
        cascade="all, delete-orphan",
        order_by="Post.position",
    )

    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=thread_tags,
        back_populates="threads",
        order_by="Tag.name",
    )

    def __repr__(self) -> str:
        return f"<Thread id={self.id!r} title={self.title!r}>"


class Post(Base):
    """
    One segment of a thread. ``position`` is 0-based and unique per thread.
    """

    __tablename__ = "posts"
    __table_args__ = (
        UniqueConstraint("thread_id", "position", name="uq_posts_thread_position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    thread_id: Mapped[int] = mapped_column(
        ForeignKey("threads.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    thread: Mapped[Thread] = relationship("Thread", back_populates="posts")
    reactions: Mapped[List["Reaction"]] = relationship(
        "Reaction",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    @property
    def reaction_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {kind.value: 0 for kind in ReactionType}
        for reaction in self.reactions:
            counts[reaction.type.value] += 1
        return counts

    def __repr__(self) -> str:
        return (
            f"<Post id={self.id!r} thread_id={self.thread_id!r} "
            f"position={self.position!r}>"
        )


class Tag(Base):
    """
    Shared, de-duplicated label. Names are stored normalized.
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(
        String(TAG_NAME_MAX_LENGTH), unique=True, nullable=False
    )

    threads: Mapped[List[Thread]] = relationship(
        "Thread",
        secondary=thread_tags,
        back_populates="tags",
    )

    def __repr__(self) -> str:
        return f"<Tag id={self.id!r} name={self.name!r}>"


# ---------------------------------------------------------------------------
# Reactions
# ---------------------------------------------------------------------------


class Reaction(Base):
    """
    A single user's reaction to one post. At most one per (user, post).
    """

    __tablename__ = "reactions"
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_reactions_user_post"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    type: Mapped[ReactionType] = mapped_column(
        SQLEnum(ReactionType, name="reaction_type_enum"),
        nullable=False,
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    user: Mapped[User] = relationship("User")
    post: Mapped[Post] = relationship("Post", back_populates="reactions")

    def __repr__(self) -> str:
        return (
            f"<Reaction id={self.id!r} user_id={self.user_id!r} "
            f"post_id={self.post_id!r} type={self.type.value!r}>"
        )


# ---------------------------------------------------------------------------
# Bookmarks / collections
# ---------------------------------------------------------------------------


class Bookmark(Base):
    __tablename__ = "bookmarks"
    __table_args__ = (
        UniqueConstraint("user_id", "thread_id", name="uq_bookmarks_user_thread"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    thread_id: Mapped[int] = mapped_column(
        ForeignKey("threads.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="bookmarks")
    thread: Mapped[Thread] = relationship("Thread")

    def __repr__(self) -> str:
        return (
            f"<Bookmark id={self.id!r} user_id={self.user_id!r} "
            f"thread_id={self.thread_id!r}>"
        )


class Collection(Base):
    """
    A user-named set of threads. Names need not be unique.
    """

    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="collections")
    threads: Mapped[List[Thread]] = relationship(
        "Thread",
        secondary=collection_threads,
        order_by="Thread.id",
    )

    def __repr__(self) -> str:
        return f"<Collection id={self.id!r} name={self.name!r}>"


# ---------------------------------------------------------------------------
# Forks
# ---------------------------------------------------------------------------


class Fork(Base):
    """
    Provenance link recorded once per fork action.
    """

    __tablename__ = "forks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    original_thread_id: Mapped[int] = mapped_column(
        ForeignKey("threads.id"), nullable=False, index=True
    )
    forked_thread_id: Mapped[int] = mapped_column(
        ForeignKey("threads.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    user: Mapped[User] = relationship("User")
    original_thread: Mapped[Thread] = relationship(
        "Thread", foreign_keys=[original_thread_id]
    )
    forked_thread: Mapped[Thread] = relationship(
        "Thread", foreign_keys=[forked_thread_id]
    )

    def __repr__(self) -> str:
        return (
            f"<Fork id={self.id!r} original_thread_id={self.original_thread_id!r} "
            f"forked_thread_id={self.forked_thread_id!r}>"
        )
