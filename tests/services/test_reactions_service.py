# tests/services/test_reactions_service.py

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from threadspire_api.db import models
from threadspire_api.db.models import ReactionType
from threadspire_api.schemas.reactions import ReactionCreate
from threadspire_api.services import ConflictError, NotFoundError, ReactionsService, ThreadsService

from tests.helpers import make_thread


@pytest.fixture
def post_id(db_session, alice):
    thread = make_thread(db_session, alice.id)
    return thread.posts[0].id


def test_add_reaction_stores_type(db_session, bob, post_id):
    reaction = ReactionsService(db_session).add_reaction(
        bob.id, ReactionCreate(post_id=post_id, type="fire")
    )

    assert reaction.type is ReactionType.FIRE
    assert reaction.symbol == "🔥"
    assert reaction.user_id == bob.id
    assert reaction.post_id == post_id


def test_reaction_from_emoji(db_session, bob, post_id):
    reaction = ReactionsService(db_session).add_reaction(
        bob.id, ReactionCreate(post_id=post_id, emoji="💡")
    )

    assert reaction.type is ReactionType.LIGHTBULB


def test_second_reaction_on_same_post_conflicts(db_session, bob, post_id):
    service = ReactionsService(db_session)
    service.add_reaction(bob.id, ReactionCreate(post_id=post_id, type="fire"))

    with pytest.raises(ConflictError) as excinfo:
        service.add_reaction(bob.id, ReactionCreate(post_id=post_id, type="heart"))

    assert excinfo.value.code == "conflict"
    count = db_session.execute(select(func.count()).select_from(models.Reaction)).scalar_one()
    assert count == 1


def test_different_users_may_react_to_same_post(db_session, alice, bob, post_id):
    service = ReactionsService(db_session)
    service.add_reaction(alice.id, ReactionCreate(post_id=post_id, type="calm"))
    service.add_reaction(bob.id, ReactionCreate(post_id=post_id, type="calm"))

    assert len(service.list_reactions()) == 2


def test_reaction_on_unknown_post(db_session, bob):
    with pytest.raises(NotFoundError) as excinfo:
        ReactionsService(db_session).add_reaction(bob.id, ReactionCreate(post_id=999, type="fire"))

    assert excinfo.value.details["resource"] == "Post"


def test_reaction_by_unknown_user(db_session, post_id):
    with pytest.raises(NotFoundError):
        ReactionsService(db_session).add_reaction(999, ReactionCreate(post_id=post_id, type="fire"))


def test_reaction_counts_on_posts(db_session, alice, bob):
    thread = make_thread(db_session, alice.id)
    first = thread.posts[0].id
    service = ReactionsService(db_session)
    service.add_reaction(alice.id, ReactionCreate(post_id=first, type="fire"))
    service.add_reaction(bob.id, ReactionCreate(post_id=first, type="fire"))

    db_session.expire_all()
    counts = ThreadsService(db_session).get_thread(thread.id).posts[0].reaction_counts

    assert counts["fire"] == 2
    assert counts["heart"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"post_id": 1},
        {"post_id": 1, "type": "thumbsup"},
        {"post_id": 1, "emoji": "👍"},
        {"post_id": 1, "type": "fire", "emoji": "❤️"},
    ],
)
def test_invalid_reaction_payloads(payload):
    with pytest.raises(ValidationError):
        ReactionCreate(**payload)


def test_heart_without_variation_selector():
    assert ReactionCreate(post_id=1, emoji="❤").kind is ReactionType.HEART


def test_kind_resolves_from_either_field():
    assert ReactionCreate(post_id=1, type="calm").kind is ReactionType.CALM
    assert ReactionCreate(post_id=1, emoji="🤯").kind is ReactionType.MINDBLOWN
