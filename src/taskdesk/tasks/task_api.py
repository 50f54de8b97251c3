# src/taskdesk/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .task_models import (
    DEFAULT_DATE_FORMAT,
    IMPORTANCE_MAX,
    IMPORTANCE_MIN,
    TaskRecord,
    parse_due_date,
    parse_importance,
    parse_title,
)

logger = logging.getLogger(__name__)


def build_task_record(
    *,
    title: str | None,
    importance: str | None,
    due_date: str | None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> TaskRecord:
    """
    Turn raw user-entered text into a TaskRecord.

    Raises InvalidInputError on the first field that does not parse.
    Importance outside 1..3 is accepted; it is only logged.
    """
    task = TaskRecord(
        title=parse_title(title),
        importance=parse_importance(importance),
        due_date=parse_due_date(due_date, date_format),
    )
    if not task.importance_in_range:
        logger.warning(
            "Importance %s outside %s-%s accepted for title=%r",
            task.importance,
            IMPORTANCE_MIN,
            IMPORTANCE_MAX,
            task.title,
        )
    return task


def format_task_row(
    task: TaskRecord, position: int | None = None, date_format: str = DEFAULT_DATE_FORMAT
) -> str:
    body = (
        f"{task.title} | Importance: {task.importance} | "
        f"Due: {task.due_date.strftime(date_format)}"
    )
    if position is None:
        return body
    return f"{position}. {body}"


def format_task_rows(
    tasks: Iterable[TaskRecord], date_format: str = DEFAULT_DATE_FORMAT
) -> list[str]:
    """Number tasks from 1 in iteration order."""
    return [format_task_row(t, i, date_format) for i, t in enumerate(tasks, start=1)]
