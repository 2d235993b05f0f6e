# tests/services/test_config.py

import pytest
from sqlalchemy import select

from threadspire_api.config import AppEnv, Settings, get_config, set_config
from threadspire_api.db import db_session, models
from threadspire_api.main import create_app


@pytest.fixture
def restore_config():
    original = get_config()
    yield
    set_config(original)


def test_set_config_replaces_singleton(restore_config):
    custom = Settings(API_PREFIX="v2/", CORS_ORIGINS="http://a.test, http://b.test")

    set_config(custom)

    assert get_config() is custom
    assert custom.api_root == "/v2"
    assert custom.cors_origins == ["http://a.test", "http://b.test"]


def test_production_requires_real_secret():
    with pytest.raises(RuntimeError):
        create_app(Settings(APP_ENV=AppEnv.PRODUCTION))


def test_db_session_commits_on_exit():
    with db_session() as db:
        db.add(models.User(email="script@example.com", password_hash="x"))

    with db_session() as db:
        emails = db.execute(select(models.User.email)).scalars().all()

    assert emails == ["script@example.com"]


def test_db_session_rolls_back_on_error():
    with pytest.raises(RuntimeError):
        with db_session() as db:
            db.add(models.User(email="script@example.com", password_hash="x"))
            db.flush()
            raise RuntimeError("boom")

    with db_session() as db:
        assert db.execute(select(models.User)).scalars().all() == []
