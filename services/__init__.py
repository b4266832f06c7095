"""
Service layer implementing business logic.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .task_service import DEMO_TASKS, TaskService

__all__ = [
    "DEMO_TASKS",
    "TaskService",
]
