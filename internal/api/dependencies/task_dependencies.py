"""
Task Dependencies.
"""

from fastapi import Request

from repositories.interfaces.task_repository_interface import ITaskRepository


def get_task_repository(request: Request) -> ITaskRepository:
    """Get the task repository created by the application lifespan."""
    return request.app.state.task_repository
