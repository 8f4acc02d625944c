"""
Push/pop routes for the task broker
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from messaging.schemas import (
    ErrorResponse,
    PushTaskRequest,
    PushTaskResponse,
    QueueStatusResponse,
    TaskResponse,
)
from task_queue import QueueRegistry

logger = logging.getLogger(__name__)

router = APIRouter()

QUEUE_PARAM_REQUIRED = "Queue query param required"
NO_TASKS_AVAILABLE = "No tasks available in queue"


def get_registry(request: Request) -> QueueRegistry:
    """Registry created by the app factory"""
    return request.app.state.registry


def _require_queue_name(queue: Optional[str]) -> str:
    if not queue:
        logger.warning("Rejected request without a queue name")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=QUEUE_PARAM_REQUIRED)
    return queue


@router.post(
    "/push",
    response_model=PushTaskResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="Add a task to a named queue",
)
def push_task(
    request: PushTaskRequest,
    queue: Optional[str] = Query(default=None, description="Target queue name"),
    registry: QueueRegistry = Depends(get_registry),
) -> PushTaskResponse:
    queue_name = _require_queue_name(queue)
    task = request.to_task()

    registry.resolve(queue_name).push(task)

    return PushTaskResponse.for_task(queue_name, task)


@router.api_route(
    "/pop",
    methods=["GET", "POST"],
    response_model=TaskResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
    summary="Take the highest priority task from a named queue",
)
def pop_task(
    queue: Optional[str] = Query(default=None, description="Target queue name"),
    registry: QueueRegistry = Depends(get_registry),
) -> TaskResponse:
    queue_name = _require_queue_name(queue)

    task = registry.resolve(queue_name).pop()
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_TASKS_AVAILABLE)

    return TaskResponse.from_task(task)


@router.get("/queues", response_model=QueueStatusResponse, summary="Depth of every known queue")
def list_queues(registry: QueueRegistry = Depends(get_registry)) -> QueueStatusResponse:
    return QueueStatusResponse(**registry.get_status())


@router.get("/health")
def health():
    return {"status": "ok"}
