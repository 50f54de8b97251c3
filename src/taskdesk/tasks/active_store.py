# src/taskdesk/tasks/active_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.errors import CapacityExceededError, OutOfRangeError
from ..core.ports import CompletionLog
from .task_models import TaskRecord

logger = logging.getLogger(__name__)

ACTIVE_CAPACITY = 100


class ActiveTaskStore:
    """
    Bounded, ordered list of pending tasks.

    Invariants:
    - tasks occupy positions 1..count with no gaps
    - count never exceeds capacity (checked on add, not a memory limit)
    - list order is the display order; only the two sorts reorder it

    Positions in the public API are 1-based, matching what the menu shows.
    """

    def __init__(self, capacity: int = ACTIVE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = int(capacity)
        self._tasks: list[TaskRecord] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def is_full(self) -> bool:
        return len(self._tasks) >= self._capacity

    # ---- mutation ----

    def add(self, task: TaskRecord) -> None:
        if self.is_full():
            raise CapacityExceededError(self._capacity)
        self._tasks.append(task)
        logger.debug("Task added pos=%s title=%r", len(self._tasks), task.title)

    def remove_at(self, position: int) -> TaskRecord:
        """Remove the task at `position`; later tasks move up one slot."""
        self._check_position(position)
        task = self._tasks.pop(position - 1)
        logger.debug("Task removed pos=%s title=%r", position, task.title)
        return task

    def complete_at(self, position: int, history: CompletionLog) -> TaskRecord:
        """
        Move the task at `position` to the front of `history`.

        Bounds are checked before anything changes and history.prepend
        cannot fail, so the task is never in both places or in neither.
        """
        self._check_position(position)
        task = self._tasks.pop(position - 1)
        history.prepend(task)
        logger.debug("Task completed pos=%s title=%r", position, task.title)
        return task

    # ---- queries ----

    def list(self) -> Iterator[tuple[int, TaskRecord]]:
        """Yield (position, task) pairs in current order, positions from 1."""
        for idx, task in enumerate(self._tasks, start=1):
            yield idx, task

    def snapshot(self) -> list[TaskRecord]:
        return list(self._tasks)

    # ---- sorting ----

    def sort_by_importance(self) -> None:
        """
        Exchange sort, ascending importance.

        Only adjacent pairs that are strictly out of order are swapped, so
        tasks with equal importance keep their relative order.
        """
        tasks = self._tasks
        n = len(tasks)
        swapped = True
        passes = 0
        while swapped:
            swapped = False
            for i in range(n - 1 - passes):
                if tasks[i].importance > tasks[i + 1].importance:
                    tasks[i], tasks[i + 1] = tasks[i + 1], tasks[i]
                    swapped = True
            passes += 1
        logger.debug("Sorted %s tasks by importance in %s passes", n, passes)

    def sort_by_due_date(self) -> None:
        """
        Partition sort, ascending due date.

        The last element of each range is the pivot. Equal dates may end up
        in any relative order.
        """
        self._quicksort_by_date(0, len(self._tasks) - 1)
        logger.debug("Sorted %s tasks by due date", len(self._tasks))

    def _quicksort_by_date(self, low: int, high: int) -> None:
        # Recurse into the smaller side to keep depth at O(log n).
        while low < high:
            p = self._partition_by_date(low, high)
            if p - low < high - p:
                self._quicksort_by_date(low, p - 1)
                low = p + 1
            else:
                self._quicksort_by_date(p + 1, high)
                high = p - 1

    def _partition_by_date(self, low: int, high: int) -> int:
        tasks = self._tasks
        pivot = tasks[high].due_date
        i = low - 1
        for j in range(low, high):
            if tasks[j].due_date < pivot:
                i += 1
                tasks[i], tasks[j] = tasks[j], tasks[i]
        tasks[i + 1], tasks[high] = tasks[high], tasks[i + 1]
        return i + 1

    # ---- helpers ----

    def _check_position(self, position: int) -> None:
        if position < 1 or position > len(self._tasks):
            raise OutOfRangeError(position, len(self._tasks))
