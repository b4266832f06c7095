"""
Interface for Task Repository.
Defines the contract that all task repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import Task


class ITaskRepository(ABC):
    """Interface for task repository operations."""

    @abstractmethod
    async def create(
        self, tasker_id: str, worker_id: str, name: str, description: str
    ) -> Task:
        """
        Create and persist a new task.

        Args:
            tasker_id: Identifier of the requesting party
            worker_id: Identifier of the assigned party
            name: Task name
            description: Task description

        Returns:
            Task: The persisted task with its generated id and timestamp
        """
        pass

    @abstractmethod
    async def persist(self, task: Task) -> None:
        """
        Persist an already-built task.

        Args:
            task: Task carrying its id and timestamp
        """
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """
        Find a task by ID.

        Args:
            task_id: ID of the task

        Returns:
            Optional[Task]: Task if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete_by_id(self, task_id: str) -> None:
        """
        Delete a task. Deleting a missing task is not an error.

        Args:
            task_id: ID of the task
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Optional[Task]]:
        """
        List every indexed task, ascending by timestamp.

        Returns:
            List[Optional[Task]]: Tasks in index order; None where an indexed
            id has no stored record
        """
        pass
