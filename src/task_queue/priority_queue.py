"""
Priority Queue for a single named task queue

Provides:
- Three fixed priority tiers (high, medium, low)
- FIFO ordering within a tier
- Strict tier precedence on pop
- Per-queue locking so concurrent callers never interleave mutations
"""

import logging
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

logger = logging.getLogger(__name__)


class TaskPriority(str, Enum):
    """Task priority levels"""
    HIGH = "high"        # Always served first
    MEDIUM = "medium"
    LOW = "low"          # Default for missing or unrecognized priorities

    @classmethod
    def parse(cls, value: Any) -> "TaskPriority":
        """Map raw input to a tier, falling back to LOW"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        return cls.LOW

    @classmethod
    def ordered(cls) -> List["TaskPriority"]:
        """Tiers in the order pop examines them"""
        return [cls.HIGH, cls.MEDIUM, cls.LOW]


@dataclass(frozen=True)
class Task:
    """Immutable task payload"""
    body: str
    priority: TaskPriority = TaskPriority.LOW

    def __post_init__(self):
        object.__setattr__(self, "priority", TaskPriority.parse(self.priority))

    def to_dict(self) -> Dict[str, str]:
        return {"body": self.body, "priority": self.priority.value}


class PriorityQueue:
    """
    A single named queue holding tasks bucketed into priority tiers.

    Pushes append to the tail of the task's tier; pops take the head of the
    highest non-empty tier. Popping an empty queue returns None immediately.
    Capacity is unbounded, so a producer that outpaces its consumers grows
    memory without limit.
    """

    def __init__(self, name: str):
        self.name = name
        self._tiers: Dict[TaskPriority, Deque[Task]] = {
            priority: deque() for priority in TaskPriority.ordered()
        }
        self._lock = threading.Lock()

    def push(self, task: Task) -> None:
        """
        Append a task to the tier matching its priority

        Args:
            task: Task to enqueue; unrecognized priorities land in LOW
        """
        priority = TaskPriority.parse(task.priority)
        with self._lock:
            self._tiers[priority].append(task)
            depth = self._depth_locked()

        logger.debug(f"Task pushed to queue '{self.name}' with {priority.value} priority (depth: {depth})")

    def pop(self) -> Optional[Task]:
        """
        Remove and return the oldest task of the highest non-empty tier

        Returns:
            Task or None if every tier is empty
        """
        with self._lock:
            for priority in TaskPriority.ordered():
                tier = self._tiers[priority]
                if tier:
                    task = tier.popleft()
                    depth = self._depth_locked()
                    break
            else:
                return None

        logger.debug(f"Task popped from queue '{self.name}' with {priority.value} priority (depth: {depth})")
        return task

    def depths(self) -> Dict[str, int]:
        """Pending task count per tier"""
        with self._lock:
            return {priority.value: len(tier) for priority, tier in self._tiers.items()}

    def _depth_locked(self) -> int:
        return sum(len(tier) for tier in self._tiers.values())

    def __len__(self) -> int:
        with self._lock:
            return self._depth_locked()

    def __repr__(self) -> str:
        return f"PriorityQueue(name={self.name!r})"
