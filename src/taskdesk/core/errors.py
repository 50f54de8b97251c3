# src/taskdesk/core/errors.py

"""
Errors raised by the task stores and field parsers.

All of them are recoverable: the menu layer reports the message and keeps
the loop running.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class; str(err) is a message fit to show the user."""


class CapacityExceededError(TaskTrackerError):
    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Task list is full (max {capacity} tasks).")


class OutOfRangeError(TaskTrackerError, IndexError):
    def __init__(self, position: int, count: int) -> None:
        self.position = position
        self.count = count
        if count == 0:
            msg = f"Invalid task number {position}: there are no tasks."
        else:
            msg = f"Invalid task number {position}: choose between 1 and {count}."
        super().__init__(msg)


class InvalidInputError(TaskTrackerError, ValueError):
    def __init__(self, field: str, raw: str, hint: str = "") -> None:
        self.field = field
        self.raw = raw
        msg = f"Invalid {field}: {raw!r}."
        if hint:
            msg = f"{msg} {hint}"
        super().__init__(msg)
