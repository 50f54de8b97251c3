# src/taskdesk/tasks/urgent_queue.py

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from .task_models import TaskRecord

logger = logging.getLogger(__name__)


class UrgentTaskQueue:
    """
    FIFO of urgent tasks, independent of the active list.

    Notes:
    - there is no dequeue: urgent tasks are only ever viewed, they accumulate
      until the process exits.
    - unbounded; enqueue never fails.
    """

    def __init__(self) -> None:
        self._items: deque[TaskRecord] = deque()

    def enqueue(self, task: TaskRecord) -> None:
        self._items.append(task)
        logger.debug("Urgent enqueue title=%r size=%s", task.title, len(self._items))

    def list(self) -> Iterator[TaskRecord]:
        """Oldest first."""
        yield from self._items

    def __iter__(self) -> Iterator[TaskRecord]:
        return self.list()

    def __len__(self) -> int:
        return len(self._items)
