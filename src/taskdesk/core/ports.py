# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) between the task stores.

The active store only needs something it can prepend completed tasks to, so
it depends on this Protocol rather than on CompletedTaskHistory. No store
holds a reference to another; the caller passes the history in.
"""

from typing import Protocol

from ..tasks.task_models import TaskRecord


class CompletionLog(Protocol):
    """Receiver of completed tasks (the completed history)."""
    def prepend(self, task: TaskRecord) -> None: ...
