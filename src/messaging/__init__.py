"""
Messaging package for the task broker

Pydantic schemas for the push/pop HTTP interface.
"""

from .schemas import (
    PushTaskRequest,
    PushTaskResponse,
    TaskResponse,
    ErrorResponse,
    QueueDepth,
    QueueStatusResponse
)

__all__ = [
    "PushTaskRequest",
    "PushTaskResponse",
    "TaskResponse",
    "ErrorResponse",
    "QueueDepth",
    "QueueStatusResponse"
]
