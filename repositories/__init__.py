"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .models import Task
from .store import InMemoryKeyValueStore, RedisKeyValueStore
from .task_repository import TaskRepository

__all__ = [
    "Task",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "TaskRepository",
]
