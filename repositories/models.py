"""
Task model and its Redis projection.

A task is stored as a hash under ``task:<id>`` holding every attribute as a
string, plus a member of the ``tasks`` sorted set scored by its timestamp.
The projection is spelled out in serialize_task / deserialize_task so the
stored field names and types stay an explicit contract.
"""

import time
import uuid
from typing import Dict

from pydantic import BaseModel, Field

# Sorted set indexing every task id by creation timestamp
TASKS_INDEX = "tasks"

TASK_KEY_PREFIX = "task:"

# Hash field names as stored in Redis
FIELD_ID = "Id"
FIELD_NAME = "Name"
FIELD_DESCRIPTION = "Description"
FIELD_TIMESTAMP = "Timestamp"
FIELD_TASKER_ID = "TaskerId"
FIELD_WORKER_ID = "WorkerId"


class Task(BaseModel):
    """Model for a task record."""

    id: str = Field(default="", description="Server-generated unique identifier")
    name: str = Field(default="", description="Task name")
    description: str = Field(default="", description="Task description")
    timestamp: int = Field(
        default=0, description="Creation time, seconds since epoch (sort key)"
    )
    tasker_id: str = Field(default="", description="Requesting party")
    worker_id: str = Field(default="", description="Assigned party")


def current_timestamp() -> int:
    """Current time in whole seconds since the epoch."""
    return int(time.time())


def new_task(tasker_id: str, worker_id: str, name: str, description: str) -> Task:
    """Build a task with a fresh id and the current time."""
    return Task(
        id=str(uuid.uuid4()),
        name=name,
        description=description,
        timestamp=current_timestamp(),
        tasker_id=tasker_id,
        worker_id=worker_id,
    )


def task_key(task_id: str) -> str:
    """Redis key of the hash holding a task's fields."""
    return f"{TASK_KEY_PREFIX}{task_id}"


def serialize_task(task: Task) -> Dict[str, str]:
    """Project a task onto string-valued hash fields."""
    return {
        FIELD_ID: task.id,
        FIELD_NAME: task.name,
        FIELD_DESCRIPTION: task.description,
        FIELD_TIMESTAMP: str(task.timestamp),
        FIELD_TASKER_ID: task.tasker_id,
        FIELD_WORKER_ID: task.worker_id,
    }


def parse_timestamp(value) -> int:
    """Parse a stored timestamp; anything unparsable reads as 0."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def deserialize_task(fields: Dict[str, str]) -> Task:
    """
    Rebuild a task from its hash fields.

    Missing fields read as empty strings and a missing or malformed
    timestamp reads as 0, rather than failing.
    """
    return Task(
        id=fields.get(FIELD_ID, ""),
        name=fields.get(FIELD_NAME, ""),
        description=fields.get(FIELD_DESCRIPTION, ""),
        timestamp=parse_timestamp(fields.get(FIELD_TIMESTAMP)),
        tasker_id=fields.get(FIELD_TASKER_ID, ""),
        worker_id=fields.get(FIELD_WORKER_ID, ""),
    )
