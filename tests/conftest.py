"""Pytest fixtures for the Task List tests."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from tasklist.main import app
from tasklist.picker import picker
from tasklist.store import TaskStore, store


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    store.reset()
    picker.select(datetime(2024, 3, 1, 9, 30))
    return TestClient(app)


@pytest.fixture
def task_store() -> TaskStore:
    """Create an empty store."""
    return TaskStore()


@pytest.fixture
def due() -> datetime:
    """A fixed due timestamp."""
    return datetime(2024, 3, 1, 9, 30)
