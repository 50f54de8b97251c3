# src/taskdesk/tasks/completed_history.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .task_models import TaskRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Node:
    task: TaskRecord
    next: _Node | None = None


class CompletedTaskHistory:
    """
    Completed tasks, most recent first.

    A singly linked chain: prepend is O(1) and nothing is ever removed or
    reordered once it is in.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def prepend(self, task: TaskRecord) -> None:
        self._head = _Node(task, self._head)
        self._size += 1
        logger.debug("History prepend title=%r size=%s", task.title, self._size)

    def list(self) -> Iterator[TaskRecord]:
        node = self._head
        while node is not None:
            yield node.task
            node = node.next

    def __iter__(self) -> Iterator[TaskRecord]:
        return self.list()

    def __len__(self) -> int:
        return self._size
