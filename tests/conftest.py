import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

# Add project root to PYTHONPATH for imports to work
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.config import Settings
from core.exceptions import StoreError
from internal.api.app import create_app
from repositories.interfaces.store_interface import IKeyValueStore
from repositories.store import InMemoryKeyValueStore
from repositories.task_repository import TaskRepository


@pytest.fixture
def settings():
    return Settings(use_in_memory_store=True, seed_demo_tasks=False)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(store):
    return TaskRepository(store)


@pytest.fixture
def failing_store():
    """Store whose every command fails as if Redis were unreachable."""
    mock_store = MagicMock(spec=IKeyValueStore)
    error = StoreError("dial tcp 127.0.0.1:6379: connection refused")
    for name in (
        "set_fields",
        "get_all_fields",
        "remove_key",
        "add_to_ordered_set",
        "remove_from_ordered_set",
        "range_ordered_set",
    ):
        setattr(mock_store, name, AsyncMock(side_effect=error))
    mock_store.ping = AsyncMock(return_value=False)
    return mock_store


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings=settings, store=store)) as test_client:
        yield test_client
