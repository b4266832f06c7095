"""
Tests for TaskRepository.

Most tests run against the in-memory store; failure paths use a mocked
store so the order of the paired writes can be checked.
"""

from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest

from core.exceptions import StoreError
from repositories.interfaces.store_interface import IKeyValueStore
from repositories.models import Task
from repositories.task_repository import TaskRepository


@pytest.mark.asyncio
async def test_create_then_get_round_trip(repository):
    created = await repository.create("t1", "w1", "A", "B")

    fetched = await repository.get_by_id(created.id)

    assert fetched == created
    assert (fetched.tasker_id, fetched.worker_id, fetched.name, fetched.description) == (
        "t1",
        "w1",
        "A",
        "B",
    )
    assert fetched.id
    assert fetched.timestamp > 0


@pytest.mark.asyncio
async def test_create_writes_hash_and_index(repository, store):
    with patch("repositories.models.current_timestamp", return_value=1700000000):
        task = await repository.create("t1", "w1", "A", "B")

    assert await store.get_all_fields(f"task:{task.id}") == {
        "Id": task.id,
        "Name": "A",
        "Description": "B",
        "Timestamp": "1700000000",
        "TaskerId": "t1",
        "WorkerId": "w1",
    }
    assert store.sorted_sets["tasks"] == {task.id: 1700000000.0}


@pytest.mark.asyncio
async def test_get_never_created_id_is_absent(repository):
    assert await repository.get_by_id("does-not-exist") is None


@pytest.mark.asyncio
async def test_get_with_unparsable_timestamp_defaults_to_zero(repository, store):
    await store.set_fields("task:x", {"Id": "x", "Name": "A", "Timestamp": "soon"})

    task = await repository.get_by_id("x")

    assert task.timestamp == 0
    assert task.name == "A"


@pytest.mark.asyncio
async def test_list_all_orders_by_timestamp(repository):
    with patch("repositories.models.current_timestamp", side_effect=[300, 100, 200]):
        late = await repository.create("t", "w", "late", "")
        early = await repository.create("t", "w", "early", "")
        middle = await repository.create("t", "w", "middle", "")

    tasks = await repository.list_all()

    assert [task.id for task in tasks] == [early.id, middle.id, late.id]


@pytest.mark.asyncio
async def test_list_all_empty(repository):
    assert await repository.list_all() == []


@pytest.mark.asyncio
async def test_list_all_keeps_dangling_index_entries(repository, store):
    with patch("repositories.models.current_timestamp", side_effect=[1, 2, 3]):
        first = await repository.create("t", "w", "first", "")
        dangling = await repository.create("t", "w", "dangling", "")
        last = await repository.create("t", "w", "last", "")

    # Hash removed out of band; index entry left behind
    await store.remove_key(f"task:{dangling.id}")

    tasks = await repository.list_all()

    assert tasks == [first, None, last]


@pytest.mark.asyncio
async def test_orphaned_hash_is_not_listed(repository, store):
    await store.set_fields("task:orphan", {"Id": "orphan", "Timestamp": "1"})

    assert await repository.list_all() == []
    assert (await repository.get_by_id("orphan")).id == "orphan"


@pytest.mark.asyncio
async def test_delete_removes_hash_and_index(repository, store):
    task = await repository.create("t1", "w1", "A", "B")

    await repository.delete_by_id(task.id)

    assert await repository.get_by_id(task.id) is None
    assert await repository.list_all() == []
    assert store.hashes == {}


@pytest.mark.asyncio
async def test_delete_is_idempotent(repository):
    task = await repository.create("t1", "w1", "A", "B")

    await repository.delete_by_id(task.id)
    await repository.delete_by_id(task.id)
    await repository.delete_by_id("never-existed")


@pytest.fixture
def mock_store():
    store = MagicMock(spec=IKeyValueStore)
    store.set_fields = AsyncMock()
    store.add_to_ordered_set = AsyncMock()
    store.remove_key = AsyncMock()
    store.remove_from_ordered_set = AsyncMock()
    store.get_all_fields = AsyncMock(return_value={})
    store.range_ordered_set = AsyncMock(return_value=[])
    return store


@pytest.mark.asyncio
async def test_create_writes_hash_before_index(mock_store):
    manager = MagicMock()
    manager.attach_mock(mock_store.set_fields, "set_fields")
    manager.attach_mock(mock_store.add_to_ordered_set, "add_to_ordered_set")

    task = await TaskRepository(mock_store).create("t1", "w1", "A", "B")

    assert [c[0] for c in manager.mock_calls] == ["set_fields", "add_to_ordered_set"]
    mock_store.add_to_ordered_set.assert_awaited_once_with("tasks", task.timestamp, task.id)


@pytest.mark.asyncio
async def test_create_skips_index_when_hash_write_fails(mock_store):
    mock_store.set_fields.side_effect = StoreError("connection refused")

    with pytest.raises(StoreError, match="connection refused"):
        await TaskRepository(mock_store).create("t1", "w1", "A", "B")

    mock_store.add_to_ordered_set.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_surfaces_index_write_failure(mock_store):
    mock_store.add_to_ordered_set.side_effect = StoreError("READONLY")

    with pytest.raises(StoreError, match="READONLY"):
        await TaskRepository(mock_store).create("t1", "w1", "A", "B")

    mock_store.set_fields.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_removes_hash_before_index(mock_store):
    await TaskRepository(mock_store).delete_by_id("abc")

    mock_store.remove_key.assert_awaited_once_with("task:abc")
    mock_store.remove_from_ordered_set.assert_awaited_once_with("tasks", "abc")


@pytest.mark.asyncio
async def test_delete_stops_when_hash_removal_fails(mock_store):
    mock_store.remove_key.side_effect = StoreError("connection refused")

    with pytest.raises(StoreError):
        await TaskRepository(mock_store).delete_by_id("abc")

    mock_store.remove_from_ordered_set.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_surfaces_index_removal_failure(mock_store):
    mock_store.remove_from_ordered_set.side_effect = StoreError("timeout")

    with pytest.raises(StoreError, match="timeout"):
        await TaskRepository(mock_store).delete_by_id("abc")


@pytest.mark.asyncio
async def test_list_all_fails_when_any_lookup_fails(mock_store):
    mock_store.range_ordered_set.return_value = ["a", "b"]
    mock_store.get_all_fields.side_effect = [
        {"Id": "a", "Timestamp": "1"},
        StoreError("connection reset"),
    ]

    with pytest.raises(StoreError, match="connection reset"):
        await TaskRepository(mock_store).list_all()

    assert mock_store.get_all_fields.await_args_list == [call("task:a"), call("task:b")]


@pytest.mark.asyncio
async def test_get_surfaces_store_error(mock_store):
    mock_store.get_all_fields.side_effect = StoreError("connection refused")

    with pytest.raises(StoreError):
        await TaskRepository(mock_store).get_by_id("abc")


class TestTransactionalWrites:
    @pytest.mark.asyncio
    async def test_create_and_delete_through_transaction(self, store):
        repository = TaskRepository(store, use_transactions=True)

        task = await repository.create("t1", "w1", "A", "B")
        assert await repository.list_all() == [task]

        await repository.delete_by_id(task.id)
        assert await repository.list_all() == []
        assert store.hashes == {}

    @pytest.mark.asyncio
    async def test_persist_uses_transaction_batch(self, mock_store):
        batch = MagicMock()
        mock_store.transaction.return_value.__aenter__.return_value = batch
        task = Task(id="abc", name="A", timestamp=9)

        await TaskRepository(mock_store, use_transactions=True).persist(task)

        batch.set_fields.assert_called_once()
        assert batch.set_fields.call_args[0][0] == "task:abc"
        batch.add_to_ordered_set.assert_called_once_with("tasks", 9, "abc")
        mock_store.set_fields.assert_not_awaited()
        mock_store.add_to_ordered_set.assert_not_awaited()
