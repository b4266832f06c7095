"""
Task service for creating tasks outside the HTTP surface.
Used at startup to seed a fixed set of demo tasks.
"""

from typing import List, Optional, Tuple

from core.logger import logger
from repositories.interfaces.task_repository_interface import ITaskRepository
from repositories.models import Task

# (tasker_id, worker_id, name, description)
DEMO_TASKS: List[Tuple[str, str, str, str]] = [
    # Tasker1 tasks
    ("tsk-1", "worker1", "Task for Worker1", "Description for Worker1"),
    ("tsk-1", "worker3", "Task for Worker3", "Description for Worker3"),
    (
        "tsk-1",
        "worker4",
        "Task for Worker4 from Tasker1",
        "Description for Worker4 from Tasker1",
    ),
    # Tasker2 tasks
    ("tsk-2", "worker5", "Task for Worker5", "Description for Worker5"),
    # Tasker3 tasks
    ("tsk-3", "worker2", "Task for Worker2", "Description for Worker2"),
    (
        "tsk-3",
        "worker4",
        "Task for Worker4 from Tasker3",
        "Description for Worker4 from Tasker3",
    ),
]


class TaskService:
    """Service for creating tasks with per-task logging."""

    def __init__(self, repository: ITaskRepository):
        self.repository = repository
        logger.debug("TaskService initialized")

    async def create_task(
        self, tasker_id: str, worker_id: str, name: str, description: str
    ) -> Optional[Task]:
        """
        Create a task, logging the outcome instead of raising.

        Returns:
            The created Task, or None if it could not be persisted
        """
        try:
            task = await self.repository.create(tasker_id, worker_id, name, description)
            logger.info(f"Added task for {worker_id} from {tasker_id}")
            return task
        except Exception as e:
            logger.error(f"Error adding task for {worker_id}: {e}")
            return None

    async def seed_demo_tasks(self) -> List[Task]:
        """
        Create the demo tasks. A failed task does not stop the rest.

        Returns:
            The tasks that were created
        """
        logger.info(f"📝 Seeding {len(DEMO_TASKS)} demo tasks...")
        created = []
        for tasker_id, worker_id, name, description in DEMO_TASKS:
            task = await self.create_task(tasker_id, worker_id, name, description)
            if task is not None:
                created.append(task)
        logger.info(f"✅ Seeded {len(created)}/{len(DEMO_TASKS)} demo tasks")
        return created
