"""Test configuration and shared fixtures."""

import os

# Settings are read at import time, so these must be set before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from mediashelf.db.base import Base
from mediashelf.db.session import build_engine, build_sessionmaker, get_db
from mediashelf.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Session bound to the test database."""
    session = build_sessionmaker(engine)()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    """TestClient whose requests use the test database."""
    TestingSession = build_sessionmaker(engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(client):
    """Headers identifying a registered user named alice."""
    client.post("/signup", json={"username": "alice", "password": "pw1"})
    return {"username": "alice"}


@pytest.fixture
def sample_item():
    return {
        "mediaId": "tt001",
        "title": "Movie A",
        "poster": "https://img.example.com/tt001.jpg",
        "mediaType": "movie",
    }
