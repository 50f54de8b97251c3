# src/taskdesk/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.errors import CapacityExceededError, TaskTrackerError
from ..core.state import AppState
from ..tasks.task_api import build_task_record, format_task_row, format_task_rows
from ..tasks.task_models import (
    DEFAULT_DATE_FORMAT,
    IMPORTANCE_MAX,
    IMPORTANCE_MIN,
    TaskRecord,
    parse_position,
)

Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt], str]

EXIT_CHOICES = ("0", "exit", "quit", "q")

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu: maps a choice ("1", "add", ...) to a handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, prompt: Prompt) -> str | None:
        """
        Run the handler for a menu selection.
        Returns the reply text, or None for an empty line.

        Task errors (full list, bad number, unparseable field) become the
        reply; the caller keeps looping.
        """
        choice = line.strip().lower()
        if not choice:
            return None

        handler = self._handlers.get(choice)
        if not handler:
            return f"Invalid choice: {line.strip()}. Pick one of the numbers in the menu."

        try:
            return handler(state, prompt)
        except TaskTrackerError as e:
            logger.info("Menu choice %s rejected: %s", choice, e)
            return str(e)

    def build_menu(self, title: str = "Task Tracker") -> str:
        lines = [f"=== {title} ==="]
        for key, label in self._labels.items():
            lines.append(f"  {key}. {label}")
        lines.append(f"  {EXIT_CHOICES[0]}. Exit")
        return "\n".join(lines)


registry = MenuRegistry()


def _date_format(state: AppState) -> str:
    return str(getattr(state.settings, "date_format", DEFAULT_DATE_FORMAT))


def _read_task(state: AppState, prompt: Prompt) -> TaskRecord:
    fmt = _date_format(state)
    title = prompt("Enter task title: ")
    importance = prompt(f"Enter importance ({IMPORTANCE_MIN}-{IMPORTANCE_MAX}): ")
    due = prompt(f"Enter due date ({date(2024, 5, 10).strftime(fmt)}): ")
    return build_task_record(title=title, importance=importance, due_date=due, date_format=fmt)


def _added_reply(task: TaskRecord, what: str) -> str:
    reply = f'{what} "{task.title}" added.'
    if not task.importance_in_range:
        reply += (
            f"\nNote: importance {task.importance} is outside "
            f"{IMPORTANCE_MIN}-{IMPORTANCE_MAX}; it was kept as entered."
        )
    return reply


def cmd_add(state: AppState, prompt: Prompt) -> str:
    # Fail before asking for three fields that cannot be stored.
    if state.active.is_full():
        raise CapacityExceededError(state.active.capacity)
    task = _read_task(state, prompt)
    state.active.add(task)
    return _added_reply(task, "Task")


def cmd_list(state: AppState, prompt: Prompt) -> str:
    fmt = _date_format(state)
    rows = [format_task_row(task, pos, fmt) for pos, task in state.active.list()]
    if not rows:
        return "No tasks found."
    return "\n".join(["Tasks:", *rows])


def cmd_remove(state: AppState, prompt: Prompt) -> str:
    if state.active.count == 0:
        return "No tasks to remove."
    position = parse_position(prompt("Enter the number of the task to remove: "))
    task = state.active.remove_at(position)
    return f'Task "{task.title}" removed.'


def cmd_complete(state: AppState, prompt: Prompt) -> str:
    if state.active.count == 0:
        return "No tasks to complete."
    position = parse_position(prompt("Enter the number of the task to mark as completed: "))
    task = state.active.complete_at(position, state.history)
    return f'Task "{task.title}" marked as completed.'


def cmd_history(state: AppState, prompt: Prompt) -> str:
    rows = format_task_rows(state.history.list(), _date_format(state))
    if not rows:
        return "No completed tasks yet."
    return "\n".join(["Completed tasks (most recent first):", *rows])


def cmd_sort_importance(state: AppState, prompt: Prompt) -> str:
    state.active.sort_by_importance()
    return "Tasks sorted by importance."


def cmd_sort_due_date(state: AppState, prompt: Prompt) -> str:
    state.active.sort_by_due_date()
    return "Tasks sorted by due date."


def cmd_add_urgent(state: AppState, prompt: Prompt) -> str:
    task = _read_task(state, prompt)
    state.urgent.enqueue(task)
    return _added_reply(task, "Urgent task")


def cmd_list_urgent(state: AppState, prompt: Prompt) -> str:
    rows = format_task_rows(state.urgent.list(), _date_format(state))
    if not rows:
        return "No urgent tasks."
    return "\n".join(["Urgent tasks (oldest first):", *rows])


registry.register("1", cmd_add, "Add task", aliases=["add"])
registry.register("2", cmd_list, "View tasks", aliases=["list", "ls"])
registry.register("3", cmd_remove, "Remove task", aliases=["remove", "rm"])
registry.register("4", cmd_complete, "Mark task as completed", aliases=["done", "complete"])
registry.register("5", cmd_history, "View completed tasks", aliases=["history"])
registry.register("6", cmd_sort_importance, "Sort tasks by importance", aliases=["sort-importance"])
registry.register("7", cmd_sort_due_date, "Sort tasks by due date", aliases=["sort-due"])
registry.register("8", cmd_add_urgent, "Add urgent task", aliases=["urgent"])
registry.register("9", cmd_list_urgent, "View urgent tasks", aliases=["urgent-list"])
