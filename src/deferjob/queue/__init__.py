"""Queue backends that hold serialized jobs until a worker runs them."""

from deferjob._internal.queue.abc import JobQueue, QueuedJob
from deferjob._internal.queue.memory import InMemoryQueue

__all__ = ("InMemoryQueue", "JobQueue", "QueuedJob")
