"""Pytest fixtures: SQLite database for fast, isolated tests."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from snack_exercise.database import Base, get_db
from snack_exercise.main import app

# Import all models so they register with Base.metadata
from snack_exercise.models.member import Member          # noqa: F401
from snack_exercise.models.exgroup import Exgroup        # noqa: F401
from snack_exercise.models.join_list import JoinList     # noqa: F401
from snack_exercise.models.exercise import Exercise      # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session for direct assertions against stored rows."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: drive the API as a given member, return the JSON response dict
# ---------------------------------------------------------------------------
def as_member(email: str) -> dict:
    """Headers identifying the caller, as the auth gateway would set them."""
    return {"X-Member-Email": email}


def create_test_member(client: TestClient, email: str = "test@example.com", nickname: str = "Tester") -> dict:
    """Helper: POST /api/members and return response JSON."""
    resp = client.post("/api/members/", json={
        "email": email,
        "nickname": nickname,
        "profile_image": f"https://cdn.example.com/{nickname}.png",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def exgroup_payload(**overrides) -> dict:
    payload = {
        "name": "Morning Relay",
        "emoji": ":runner:",
        "color": "#FF7A00",
        "description": "Ten squats every hour",
        "max_member_num": 6,
        "goal_relay_num": 30,
        "start_time": "09:00:00",
        "end_time": "21:00:00",
        "penalty": "Buy everyone coffee",
        "mission_interval_time": 60,
        "check_interval_time": 10,
        "check_max_num": 3,
    }
    payload.update(overrides)
    return payload


def create_test_exgroup(client: TestClient, host_email: str, **overrides) -> dict:
    """Helper: POST /api/exgroups as ``host_email``, then GET the full exgroup."""
    resp = client.post("/api/exgroups/", json=exgroup_payload(**overrides), headers=as_member(host_email))
    assert resp.status_code == 201, resp.text
    resp = client.get(f"/api/exgroups/{resp.json()['exgroup_id']}")
    assert resp.status_code == 200, resp.text
    return resp.json()


def join_test_exgroup(client: TestClient, email: str, code: str) -> dict:
    """Helper: POST /api/exgroups/join and return response JSON."""
    resp = client.post("/api/exgroups/join", json={"code": code}, headers=as_member(email))
    assert resp.status_code == 201, resp.text
    return resp.json()
