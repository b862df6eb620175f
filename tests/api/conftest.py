"""Fixtures for API tests.

Each test gets a fresh in-memory SQLite database, a pinned clock and
four users: two athletes, a trainer and a blocked account.
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.clock import get_clock
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.main import app
from app.models.user import User, UserRole

FIXED_NOW = datetime.datetime(2024, 1, 15, 12, 0, 0)


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="users")
def users_fixture(session) -> dict[str, int]:
    repository = UserRepository(session)
    created = {
        "athlete": User(name="test athlete", email="test-athlete@mail.com"),
        "athlete2": User(name="test athlete 2", email="test-athlete-2@mail.com"),
        "trainer": User(name="test trainer", email="test-trainer@mail.com", role=UserRole.TRAINER.value),
        "blocked": User(name="blocked athlete", email="blocked@mail.com", blocked=True),
    }
    return {key: repository.create(user).id for key, user in created.items()}


def _plan_payload(trainer_id: int, **overrides) -> dict:
    payload = {
        "title": "Test plan",
        "type": "Running",
        "description": "Test description",
        "difficulty": 1,
        "state": "active",
        "trainerId": trainer_id,
        "location": "Test loc",
        "days": "monday, tuesday",
        "start": "10:00",
        "end": "11:00",
    }
    payload.update(overrides)
    return payload


def _create_plan(client: TestClient, trainer_id: int, **overrides) -> dict:
    response = client.post("/api/trainings", json=_plan_payload(trainer_id, **overrides))
    assert response.status_code == 200, response.json()
    return response.json()


def _session_payload(**overrides) -> dict:
    payload = {
        "distance": 15,
        "calories": 15,
        "duration": "01:00:00",
        "date": "2022-05-27T07:00:00Z",
        "steps": 15,
    }
    payload.update(overrides)
    return payload


def _record_session(client: TestClient, plan_id: int, user_id: int, **overrides) -> dict:
    response = client.post(f"/api/trainings/{plan_id}/user_training/{user_id}", json=_session_payload(**overrides))
    assert response.status_code == 200, response.json()
    return response.json()


@pytest.fixture(name="plan_payload")
def plan_payload_fixture():
    """Build a plan request body: ``plan_payload(trainer_id, **overrides)``."""
    return _plan_payload


@pytest.fixture(name="create_plan")
def create_plan_fixture(client):
    """Create a plan through the API: ``create_plan(trainer_id, **overrides)``."""
    return lambda trainer_id, **overrides: _create_plan(client, trainer_id, **overrides)


@pytest.fixture(name="session_payload")
def session_payload_fixture():
    return _session_payload


@pytest.fixture(name="record_session")
def record_session_fixture(client):
    """Log a session through the API: ``record_session(plan_id, user_id, **overrides)``."""
    return lambda plan_id, user_id, **overrides: _record_session(client, plan_id, user_id, **overrides)
