"""Pytest configuration and fixtures for tasklist-mcp tests."""

from datetime import datetime, timezone

import pytest

from tasklist_mcp.config import Settings
from tasklist_mcp.models.task import TaskModel
from tasklist_mcp.session import EditSession
from tasklist_mcp.state import build_state, reset_state
from tasklist_mcp.store import TaskStore


@pytest.fixture
def memory_settings():
    """Settings with persistence disabled."""
    return Settings(data_file=None, log_level="WARNING", list_limit=50)


@pytest.fixture
def app_state(memory_settings):
    """Fresh process-wide state for tool tests."""
    state = reset_state(build_state(memory_settings))
    yield state
    reset_state(build_state(memory_settings))


@pytest.fixture
def store():
    """An empty task store."""
    return TaskStore()


@pytest.fixture
def session(seeded_store):
    """A closed edit session bound to the seeded store."""
    return EditSession(seeded_store)


@pytest.fixture
def sample_task_models():
    """A list of sample tasks as TaskModel instances."""
    return [
        TaskModel(
            id="a1b2c3d4e5f60718293a4b5c6d7e8f90",
            title="Buy milk",
            tags=["errand"],
        ),
        TaskModel(
            id="b2c3d4e5f60718293a4b5c6d7e8f90a1",
            title="Write report",
            details="Quarterly numbers",
            completed=True,
            due_date=datetime(2025, 3, 4, 15, 30, tzinfo=timezone.utc),
            tags=["work", "urgent"],
        ),
        TaskModel(
            id="c3d4e5f60718293a4b5c6d7e8f90a1b2",
            title="Call plumber",
            due_date=datetime(2025, 2, 1, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def seeded_store(sample_task_models):
    """A store holding the sample tasks."""
    return TaskStore(sample_task_models)
