# tests/conftest.py
import os

# Cheap hashes for tests; must be set before the app reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from app.core.session import SessionState, SessionStore, get_session_store
from app.main import app

SIGNUP = {"name": "Ann", "email": "ann@x.com", "password": "secret1"}


@pytest.fixture
def store():
    return SessionStore(ttl_seconds=3600)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_session_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    """A client whose session has already signed up (and so is logged in)."""
    r = client.post("/", data={"action": "signup", **SIGNUP})
    assert r.json()["success"] is True
    return client


@pytest.fixture
def session():
    return SessionState()


@pytest.fixture
def auth_session(session):
    session.authenticated = True
    return session
