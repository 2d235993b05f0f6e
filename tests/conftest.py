# tests/conftest.py
import os

# Must happen before threadspire_api is imported: the engine is built from
# these settings at import time.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "testing"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_FORMAT"] = "console"

import pytest
from fastapi.testclient import TestClient

from threadspire_api.db import Base, SessionLocal, engine
from threadspire_api.main import app

from tests.helpers import make_user, register_and_login


@pytest.fixture(autouse=True)
def _fresh_schema():
    """Every test starts from an empty in-memory database."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice(db_session):
    return make_user(db_session)


@pytest.fixture
def bob(db_session):
    return make_user(db_session, email="bob@example.com", name="Bob")


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def other_headers(client):
    return register_and_login(client, email="bob@example.com", name="Bob")
