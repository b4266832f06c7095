"""
API Schemas (Request/Response Models).
"""

from .common_schemas import HealthResponse
from .task_schemas import (
    TaskCreateRequest,
    TaskCreateResponse,
    TaskDeleteResponse,
    TaskDetailResponse,
    TaskErrorResponse,
    TaskListResponse,
)

__all__ = [
    # Common schemas
    "HealthResponse",
    # Task schemas
    "TaskCreateRequest",
    "TaskCreateResponse",
    "TaskDeleteResponse",
    "TaskDetailResponse",
    "TaskErrorResponse",
    "TaskListResponse",
]
