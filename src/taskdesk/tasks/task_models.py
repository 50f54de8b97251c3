# src/taskdesk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.errors import InvalidInputError

IMPORTANCE_MIN = 1
IMPORTANCE_MAX = 3

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """
    A single task.

    Notes:
    - there is no id: a task is identified by its position in whichever
      container currently holds it.
    - importance is nominally 1 (low) .. 3 (high) but is not range-checked;
      see importance_in_range.
    """

    title: str
    importance: int
    due_date: date

    @property
    def importance_in_range(self) -> bool:
        return IMPORTANCE_MIN <= self.importance <= IMPORTANCE_MAX


def parse_title(raw: str | None) -> str:
    title = (raw or "").strip()
    if not title:
        raise InvalidInputError("title", raw or "", "Title must not be empty.")
    return title


def parse_importance(raw: str | None) -> int:
    """Integer parse only; values outside 1..3 are returned as-is."""
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        raise InvalidInputError(
            "importance", text, f"Enter a whole number ({IMPORTANCE_MIN}-{IMPORTANCE_MAX})."
        ) from None


def parse_due_date(raw: str | None, fmt: str = DEFAULT_DATE_FORMAT) -> date:
    text = (raw or "").strip()
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        example = date(2024, 5, 10).strftime(fmt)
        raise InvalidInputError("due date", text, f"Expected a date like {example}.") from None


def parse_position(raw: str | None) -> int:
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        raise InvalidInputError("task number", text, "Enter the number shown in the list.") from None
