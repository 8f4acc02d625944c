"""
Task Queue Module

Provides named, in-memory priority queues for the task broker.
"""

from .priority_queue import PriorityQueue, Task, TaskPriority
from .queue_registry import QueueRegistry

__all__ = ['PriorityQueue', 'QueueRegistry', 'Task', 'TaskPriority']
