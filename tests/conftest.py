"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

import json

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from squadrate.db.models import Base
from squadrate.enrich.clock import ManualClock
from squadrate.players.dataset import LocalDatasetStore

# A fixed point in time so cache and rate window arithmetic is exact
START_TIME = 1_700_000_000.0


@pytest.fixture(scope="session")
def test_engine():
    """
    Create a test database engine.

    Uses SQLite in-memory for fast tests.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
    )
    return engine


@pytest.fixture(scope="session")
def tables(test_engine):
    """
    Create all tables for testing.

    This fixture runs once per test session.
    """
    Base.metadata.create_all(test_engine)
    yield
    Base.metadata.drop_all(test_engine)


@pytest.fixture
def db_session(test_engine, tables):
    """
    Create a database session for a test.

    Each test gets its own session with automatic rollback,
    ensuring tests don't affect each other.
    """
    connection = test_engine.connect()
    transaction = connection.begin()

    Session = sessionmaker(bind=connection)
    session = Session()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def clock():
    """A clock that only moves when the test advances it."""
    return ManualClock(start=START_TIME)


@pytest.fixture
def builtin_store():
    """Dataset store with the built-in players only (no disk access)."""
    return LocalDatasetStore(candidate_paths=[])


@pytest.fixture
def dataset_records():
    """Records in the on-disk export schema."""
    return [
        {
            "id": 256790,
            "name": "Jamal Musiala",
            "age": 2003,
            "positions": "CAM, LM",
            "overall": 87,
            "potential": 92,
            "height_cm": 184,
            "weight_kg": 72,
            "preferred_foot": "Right",
            "weak_foot": 4,
            "skill_moves": 5,
            "work_rate": "High/Medium",
            "nationality": "Germany",
            "main_attributes": {
                "pace": 85,
                "shooting": 79,
                "passing": 80,
                "dribbling": 91,
                "defending": 62,
                "physical": 64,
            },
            "detailed_skills": {
                "attacking": {"finishing": 82, "short_passing": 86, "heading_accuracy": 48},
                "skill": {"dribbling": 93, "fk_accuracy": 70},
                "defending": {"defensive_awareness": 57, "sliding_tackle": 55},
            },
        },
        {
            # Overrides the built-in entry of the same name
            "id": 239085,
            "name": "Erling Haaland",
            "age": 24,
            "positions": "ST",
            "overall": 92,
        },
        {"id": 1, "positions": "GK"},
    ]


@pytest.fixture
def dataset_dir(tmp_path, dataset_records):
    """A directory holding the export at the second candidate path."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "sofifa_my_players_app.json").write_text(
        json.dumps(dataset_records), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def mock_client():
    """Factory for HTTP clients whose every request is answered by a handler."""
    def build(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return build
