# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings once and wires the
three in-memory task stores into an AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.active_store import ACTIVE_CAPACITY, ActiveTaskStore
from ..tasks.completed_history import CompletedTaskHistory
from ..tasks.urgent_queue import UrgentTaskQueue

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    capacity = int(getattr(settings, "active_capacity", ACTIVE_CAPACITY))
    state = AppState(
        settings=settings,
        active=ActiveTaskStore(capacity=capacity),
        history=CompletedTaskHistory(),
        urgent=UrgentTaskQueue(),
    )
    logger.debug("AppState ready capacity=%s", capacity)
    return state
