"""
Shared test fixtures and configuration for entire test suite.

Provides: file-backed SQLite record store, sample alumni records,
mocked chat model, collection settings
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.llm.assistant_model import AssistantModel
from backend.configs import CollectionSettings


@pytest.fixture
async def record_store(tmp_path: Path):
    """
    Create an initialized SQLite record store with tables.

    A file database gives every session its own connection, so concurrent
    collection reads behave as they do against PostgreSQL.

    Yields:
        RecordStoreClient: Initialized client, disposed after the test
    """
    client = RecordStoreClient(f"sqlite+aiosqlite:///{tmp_path / 'records.db'}")
    await client.initialize()
    await client.create_tables()
    yield client
    await client.dispose()


@pytest.fixture
def collections() -> CollectionSettings:
    """Default collection names."""
    return CollectionSettings()


@pytest.fixture
def mock_assistant_model() -> AsyncMock:
    """
    Create mock AssistantModel.

    Returns:
        AsyncMock: complete() returns a fixed HTML reply
    """
    model = AsyncMock(spec=AssistantModel)
    model.complete = AsyncMock(return_value="<p>Here are the upcoming events 🎉</p>")
    return model


@pytest.fixture
def sample_event() -> dict:
    """Event record as stored by the frontend."""
    return {
        "title": "Reunion",
        "type": "Social",
        "date": "2025-01-01",
        "organizer": "Alumni Office",
    }


@pytest.fixture
def sample_user() -> dict:
    """Fully populated alumni profile."""
    return {
        "name": "Asha Rao",
        "role": "alumni",
        "college": "Engineering",
        "profession": "Data Scientist",
        "batch": "2015",
        "gradYear": 2019,
        "company": "Acme Analytics",
        "city": "Pune",
        "email": "asha@example.com",
    }
