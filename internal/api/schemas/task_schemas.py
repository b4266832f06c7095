"""
Pydantic schemas for Task Management API.
"""

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator
from typing import Any, List, Optional

from repositories.models import Task

TASK_EXAMPLE = {
    "id": "7f9c2ba4-e88f-4b1e-9d3c-2c1a3f1e9b10",
    "name": "Task for Worker1",
    "description": "Description for Worker1",
    "timestamp": 1730563200,
    "tasker_id": "tsk-1",
    "worker_id": "worker1",
}


class TaskCreateRequest(BaseModel):
    """
    Request model for task creation.

    Missing or null text fields bind as empty strings and a null body binds
    as an empty object. id and timestamp are type-checked but the server
    assigns both.
    """

    id: Optional[str] = Field(default=None, description="Ignored; assigned by the server")
    name: str = Field(default="", description="Task name")
    description: str = Field(default="", description="Task description")
    timestamp: Optional[StrictInt] = Field(
        default=None, description="Ignored; assigned by the server"
    )
    tasker_id: str = Field(default="", description="Requesting party")
    worker_id: str = Field(default="", description="Assigned party")

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("name", "description", "tasker_id", "worker_id", mode="before")
    @classmethod
    def _null_is_empty_string(cls, value: Any) -> Any:
        return "" if value is None else value

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "name": "A",
                    "description": "B",
                    "tasker_id": "t1",
                    "worker_id": "w1",
                }
            ]
        }


class TaskListResponse(BaseModel):
    """Response model for listing tasks. Entries whose record is missing are null."""

    tasks: List[Optional[Task]]

    class Config:
        json_schema_extra = {"examples": [{"tasks": [TASK_EXAMPLE]}]}


class TaskDetailResponse(BaseModel):
    """Response model for a single task."""

    task: Task

    class Config:
        json_schema_extra = {"examples": [{"task": TASK_EXAMPLE}]}


class TaskCreateResponse(BaseModel):
    """Response model for task creation, both on success and on failure."""

    task: Task
    created: bool
    message: str

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "task": TASK_EXAMPLE,
                    "created": True,
                    "message": "Task Created Successfully",
                }
            ]
        }


class TaskDeleteResponse(BaseModel):
    """Response model for task deletion, both on success and on failure."""

    id: str
    message: str

    class Config:
        json_schema_extra = {
            "examples": [{"id": TASK_EXAMPLE["id"], "message": "Task deleted"}]
        }


class TaskErrorResponse(BaseModel):
    """Error response; id is present when the request addressed one task."""

    id: Optional[str] = None
    message: str
