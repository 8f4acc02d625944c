"""
Registry of named priority queues

Maps queue names to PriorityQueue instances, creating them on first
reference. Lookups of existing names are lock-free; only creation takes the
registry lock.
"""

import logging
import threading
from typing import Any, Dict, List

from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)


class QueueRegistry:
    """
    Process-wide mapping from queue name to PriorityQueue

    Queues are never removed once created. Status collection locks one queue
    at a time and must never hold two queue locks together.
    """

    def __init__(self):
        self._queues: Dict[str, PriorityQueue] = {}
        self._create_lock = threading.Lock()

    def resolve(self, name: str) -> PriorityQueue:
        """
        Get the queue for a name, creating an empty one if needed

        Args:
            name: Queue name; any string is accepted

        Returns:
            The single PriorityQueue instance bound to this name
        """
        queue = self._queues.get(name)
        if queue is not None:
            return queue

        with self._create_lock:
            # Another caller may have created it while we waited
            queue = self._queues.get(name)
            if queue is None:
                queue = PriorityQueue(name)
                self._queues[name] = queue
                logger.info(f"Created queue '{name}' ({len(self._queues)} queues total)")

        return queue

    def names(self) -> List[str]:
        return sorted(self._queues)

    def get_status(self) -> Dict[str, Any]:
        """Get current depth of every queue"""
        queues = {}
        total_depth = 0
        for name, queue in list(self._queues.items()):
            tiers = queue.depths()
            depth = sum(tiers.values())
            total_depth += depth
            queues[name] = {"depth": depth, "tiers": tiers}

        return {
            "queue_count": len(queues),
            "total_depth": total_depth,
            "queues": queues,
        }

    def __contains__(self, name: object) -> bool:
        return name in self._queues

    def __len__(self) -> int:
        return len(self._queues)
