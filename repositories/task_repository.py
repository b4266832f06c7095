"""
Task repository for Redis operations.
Includes comprehensive logging and error handling for all CRUD operations.

Each task lives in two structures: a hash with its fields and an entry in
the ``tasks`` sorted set. Creates write the hash first and the index
second; deletes remove the hash first and the index entry second. The two
steps are not atomic unless ``use_transactions`` is set, so a crash in
between can leave an index entry without a hash (or a hash that was never
indexed). Readers tolerate the former by yielding None for it.
"""

from typing import List, Optional

from core.logger import logger
from repositories.interfaces.store_interface import IKeyValueStore
from repositories.interfaces.task_repository_interface import ITaskRepository
from repositories.models import (
    TASKS_INDEX,
    Task,
    deserialize_task,
    new_task,
    serialize_task,
    task_key,
)


class TaskRepository(ITaskRepository):
    """Repository for task records with detailed logging."""

    def __init__(self, store: IKeyValueStore, use_transactions: bool = False):
        """
        Initialize task repository.

        Args:
            store: Key-value store handle shared by all requests
            use_transactions: Wrap the paired writes of create/delete in one
                MULTI/EXEC block instead of issuing them one after another
        """
        self.store = store
        self.use_transactions = use_transactions
        logger.debug(
            f"TaskRepository initialized: index={TASKS_INDEX}, transactions={use_transactions}"
        )

    async def create(
        self, tasker_id: str, worker_id: str, name: str, description: str
    ) -> Task:
        """
        Create a new task.

        Args:
            tasker_id: Identifier of the requesting party
            worker_id: Identifier of the assigned party
            name: Task name
            description: Task description

        Returns:
            Created Task

        Raises:
            StoreError: If either write fails
        """
        task = new_task(tasker_id, worker_id, name, description)
        await self.persist(task)
        return task

    async def persist(self, task: Task) -> None:
        """
        Write the task's hash, then add its id to the index.

        If the hash write fails the index write is not attempted.

        Raises:
            StoreError: If either write fails
        """
        try:
            logger.info(f"📝 Persisting task: id={task.id}, worker_id={task.worker_id}")
            key = task_key(task.id)
            fields = serialize_task(task)

            if self.use_transactions:
                async with self.store.transaction() as batch:
                    batch.set_fields(key, fields)
                    batch.add_to_ordered_set(TASKS_INDEX, task.timestamp, task.id)
            else:
                await self.store.set_fields(key, fields)
                await self.store.add_to_ordered_set(TASKS_INDEX, task.timestamp, task.id)

            logger.info(f"✅ Task persisted: id={task.id}, timestamp={task.timestamp}")

        except Exception as e:
            logger.error(f"❌ Failed to persist task {task.id}: {e}")
            raise

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """
        Get task by ID.

        Args:
            task_id: Task identifier

        Returns:
            Task or None if not found

        Raises:
            StoreError: If the read fails
        """
        try:
            logger.debug(f"🔍 Fetching task: id={task_id}")
            fields = await self.store.get_all_fields(task_key(task_id))

            if not fields:
                logger.debug(f"Task not found: id={task_id}")
                return None

            return deserialize_task(fields)

        except Exception as e:
            logger.error(f"❌ Failed to get task {task_id}: {e}")
            raise

    async def delete_by_id(self, task_id: str) -> None:
        """
        Delete a task's hash, then its index entry.

        Does not check that the task existed; deleting twice is fine.

        Raises:
            StoreError: If either removal fails
        """
        try:
            logger.info(f"📝 Deleting task: id={task_id}")
            key = task_key(task_id)

            if self.use_transactions:
                async with self.store.transaction() as batch:
                    batch.remove_key(key)
                    batch.remove_from_ordered_set(TASKS_INDEX, task_id)
            else:
                await self.store.remove_key(key)
                await self.store.remove_from_ordered_set(TASKS_INDEX, task_id)

            logger.info(f"✅ Task deleted: id={task_id}")

        except Exception as e:
            logger.error(f"❌ Failed to delete task {task_id}: {e}")
            raise

    async def list_all(self) -> List[Optional[Task]]:
        """
        List all tasks ascending by timestamp.

        Ids are read from the index and resolved one by one. An id whose
        hash is gone yields None in its slot; any read error fails the
        whole listing.

        Raises:
            StoreError: If the index read or any task read fails
        """
        try:
            task_ids = await self.store.range_ordered_set(TASKS_INDEX, 0, -1)
            logger.debug(f"🔍 Listing tasks: {len(task_ids)} indexed")

            tasks: List[Optional[Task]] = []
            for task_id in task_ids:
                task = await self.get_by_id(task_id)
                if task is None:
                    logger.warning(f"⚠️ Indexed task has no record: id={task_id}")
                tasks.append(task)

            return tasks

        except Exception as e:
            logger.error(f"❌ Failed to list tasks: {e}")
            raise
