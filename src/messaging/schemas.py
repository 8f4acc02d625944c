"""
Message schemas for the task broker HTTP interface
"""

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from task_queue import Task, TaskPriority


class PushTaskRequest(BaseModel):
    """Task payload accepted by the push endpoint"""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"examples": [{"body": "resize image 42", "priority": "high"}]}
    )

    body: str = Field(default="", description="Opaque task payload")
    priority: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="One of high, medium, low; anything else is treated as low"
    )

    @field_validator('priority')
    @classmethod
    def normalize_priority(cls, v):
        return TaskPriority.parse(v).value

    def to_task(self) -> Task:
        return Task(body=self.body, priority=TaskPriority.parse(self.priority))


class PushTaskResponse(BaseModel):
    """Acknowledgement of an accepted task"""
    queue: str
    priority: TaskPriority
    message: str

    @classmethod
    def for_task(cls, queue: str, task: Task) -> "PushTaskResponse":
        return cls(
            queue=queue,
            priority=task.priority,
            message=f"Task added to queue '{queue}' with priority: {task.priority.value}"
        )


class TaskResponse(BaseModel):
    """Task returned by the pop endpoint"""
    body: str
    priority: TaskPriority

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(body=task.body, priority=task.priority)


class ErrorResponse(BaseModel):
    """Client-visible error"""
    detail: str


class QueueDepth(BaseModel):
    depth: int
    tiers: Dict[str, int]


class QueueStatusResponse(BaseModel):
    """Snapshot of every known queue"""
    queue_count: int
    total_depth: int
    queues: Dict[str, QueueDepth] = Field(default_factory=dict)
