import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["CLIENT_ORIGIN"] = "http://localhost:5173, http://app.example.com"
os.environ.pop("MONGO_URI", None)
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from todo_api.database.connection import Base, SessionLocal, get_engine
from todo_api.models import todo, user  # noqa: F401
from todo_api.main import app


@pytest.fixture
def db():
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal(bind=engine)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def session_store():
    store = app.state.session_store
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def client(db, session_store):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    def _register(username="alice", email="alice@x.com", password="pw1"):
        response = client.post(
            "/api/user/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def login(client):
    def _login(email="alice@x.com", password="pw1"):
        response = client.post("/api/user/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()
    return _login
