"""
API Dependencies.
"""

from .task_dependencies import get_task_repository

__all__ = [
    "get_task_repository",
]
