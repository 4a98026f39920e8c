import asyncio
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from config import settings
from config.database import Database, get_db
from crud import user_crud
from main import app
from schemas.user import UserCreate
from services.auth_service import create_session_token

PASSWORD = "secret123"


def run(coro):
    """Run a coroutine against the in-memory database from a sync test."""
    return asyncio.run(coro)


@pytest.fixture
def db():
    """A fresh in-memory database for each test."""
    return Database(AsyncMongoMockClient()["salon_test"])


@pytest.fixture
def client(db):
    # No context manager: the lifespan would try to reach a real MongoDB
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(username="owner", role="owner", **extra):
        return run(user_crud.create_user(db, UserCreate(
            username=username,
            email=extra.pop("email", f"{username.lower()}@salon-example.com"),
            name=extra.pop("name", username.title()),
            password=extra.pop("password", PASSWORD),
            role=role,
            **extra
        )))
    return _make_user


@pytest.fixture
def login_as(client):
    """Put a valid session cookie for ``user`` on the test client."""
    def _login_as(user):
        client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user))
        return client
    return _login_as


@pytest.fixture
def owner(make_user):
    return make_user("owner", "owner")


@pytest.fixture
def therapist(make_user):
    return make_user(
        "tina", "therapist", name="Tina Therapist", employment_type="employed", hourly_rate=12.0
    )


@pytest.fixture
def owner_client(login_as, owner):
    return login_as(owner)
