"""
Shared fixtures: a fresh in-memory database per test and a TestClient
wired to it.
"""

import os

os.environ["ACCESS_TOKEN_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_db
from main import app
from models import Base


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Registers alice/wonderland and returns the credentials"""
    credentials = {"username": "alice", "password": "wonderland"}
    response = client.post("/api/register", json=credentials)
    assert response.status_code == 201
    return credentials


@pytest.fixture
def access_token(client, registered_user):
    response = client.post("/api/login", json=registered_user)
    assert response.status_code == 200
    return response.json()
