"""
Repository Interfaces.
"""

from .store_interface import IKeyValueStore, IStoreBatch
from .task_repository_interface import ITaskRepository

__all__ = [
    "IKeyValueStore",
    "IStoreBatch",
    "ITaskRepository",
]
