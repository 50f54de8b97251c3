# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.active_store import ActiveTaskStore
from ..tasks.completed_history import CompletedTaskHistory
from ..tasks.urgent_queue import UrgentTaskQueue


@dataclass(slots=True)
class AppState:
    """
    Everything one session owns: settings plus the three task stores.

    Built once in cli.bootstrap and passed by reference to every menu
    handler. Single-threaded: no locking.
    """

    settings: Any
    active: ActiveTaskStore
    history: CompletedTaskHistory
    urgent: UrgentTaskQueue
