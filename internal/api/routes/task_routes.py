"""
Task API Routes.
Includes detailed logging and comprehensive error handling.

Every failure is reported as 500 with the error text, including request
bodies that are not valid JSON. A missing task is 404 only on the
single-task GET.
"""

import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.logger import logger
from internal.api.dependencies.task_dependencies import get_task_repository
from internal.api.schemas.task_schemas import (
    TaskCreateRequest,
    TaskCreateResponse,
    TaskDeleteResponse,
    TaskDetailResponse,
    TaskErrorResponse,
    TaskListResponse,
)
from internal.api.utils import json_response
from repositories.interfaces.task_repository_interface import ITaskRepository
from repositories.models import Task, new_task

router = APIRouter(prefix="/task", tags=["Tasks"])


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List Tasks",
    description="List every task, oldest first",
    responses={500: {"model": TaskErrorResponse, "description": "Store error"}},
)
async def list_tasks(
    repository: ITaskRepository = Depends(get_task_repository),
) -> JSONResponse:
    """
    List all tasks ordered by creation timestamp.

    Entries whose record has gone missing from the store are returned as null.
    """
    start_time = time.time()

    try:
        tasks = await repository.list_all()
        elapsed_time = time.time() - start_time
        logger.info(f"API: Listed {len(tasks)} tasks in {elapsed_time:.3f}s")
        return json_response(status.HTTP_200_OK, TaskListResponse(tasks=tasks))

    except Exception as e:
        elapsed_time = time.time() - start_time
        logger.error(f"❌ API: List tasks failed after {elapsed_time:.3f}s: {e}")
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            TaskErrorResponse(message=str(e)),
            exclude_none=True,
        )


@router.get(
    "/{task_id}",
    response_model=TaskDetailResponse,
    summary="Get Task",
    description="Get a single task by ID",
    responses={
        404: {"model": TaskErrorResponse, "description": "Task not found"},
        500: {"model": TaskErrorResponse, "description": "Store error"},
    },
)
async def get_task(
    task_id: str,
    repository: ITaskRepository = Depends(get_task_repository),
) -> JSONResponse:
    """Get a task by its ID."""
    try:
        task = await repository.get_by_id(task_id)

    except Exception as e:
        logger.error(f"❌ API: Get task failed: id={task_id}, error={e}")
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            TaskErrorResponse(id=task_id, message=str(e)),
        )

    if task is None:
        logger.warning(f"⚠️ API: Task not found: id={task_id}")
        return json_response(
            status.HTTP_404_NOT_FOUND,
            TaskErrorResponse(id=task_id, message="not found"),
        )

    return json_response(status.HTTP_200_OK, TaskDetailResponse(task=task))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskCreateResponse,
    summary="Create Task",
    description="Create a task; its id and timestamp are assigned by the server",
    responses={
        500: {
            "model": TaskCreateResponse,
            "description": "Malformed request body or store error",
        }
    },
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": TaskCreateRequest.model_json_schema()}
            },
            "required": True,
        }
    },
)
async def create_task(
    request: Request,
    repository: ITaskRepository = Depends(get_task_repository),
) -> JSONResponse:
    """
    Create a new task.

    **Body:** name, description, tasker_id, worker_id (all optional strings).

    **Returns:** the stored task with its generated id and timestamp.
    """
    start_time = time.time()

    # Body is bound by hand so that malformed input gets this endpoint's
    # response shape instead of FastAPI's 422
    try:
        payload = TaskCreateRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.error(f"❌ API: Invalid task body: {e}")
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            TaskCreateResponse(task=Task(), created=False, message=str(e)),
        )

    task = new_task(
        tasker_id=payload.tasker_id,
        worker_id=payload.worker_id,
        name=payload.name,
        description=payload.description,
    )

    try:
        await repository.persist(task)

    except Exception as e:
        elapsed_time = time.time() - start_time
        logger.error(f"❌ API: Create task failed after {elapsed_time:.3f}s: {e}")
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            TaskCreateResponse(task=task, created=False, message=str(e)),
        )

    elapsed_time = time.time() - start_time
    logger.info(f"API: Task created: id={task.id}, time={elapsed_time:.3f}s")
    return json_response(
        status.HTTP_201_CREATED,
        TaskCreateResponse(task=task, created=True, message="Task Created Successfully"),
    )


@router.delete(
    "/{task_id}",
    response_model=TaskDeleteResponse,
    summary="Delete Task",
    description="Delete a task by ID; deleting a missing task succeeds",
    responses={500: {"model": TaskDeleteResponse, "description": "Store error"}},
)
async def delete_task(
    task_id: str,
    repository: ITaskRepository = Depends(get_task_repository),
) -> JSONResponse:
    """Delete a task by its ID."""
    try:
        await repository.delete_by_id(task_id)

    except Exception as e:
        logger.error(f"❌ API: Delete task failed: id={task_id}, error={e}")
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            TaskDeleteResponse(id=task_id, message=str(e)),
        )

    logger.info(f"API: Task deleted: id={task_id}")
    return json_response(
        status.HTTP_200_OK, TaskDeleteResponse(id=task_id, message="Task deleted")
    )
