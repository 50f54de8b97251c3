# tests/test_history_and_urgent.py

from __future__ import annotations

from taskdesk.tasks.completed_history import CompletedTaskHistory
from taskdesk.tasks.urgent_queue import UrgentTaskQueue


def test_history_lists_newest_first(make_task) -> None:
    history = CompletedTaskHistory()
    a, b = make_task("A"), make_task("B")

    history.prepend(a)
    history.prepend(b)

    assert list(history.list()) == [b, a]
    assert len(history) == 2


def test_history_listing_is_restartable_and_read_only(make_task) -> None:
    history = CompletedTaskHistory()
    for title in ("x", "y", "z"):
        history.prepend(make_task(title))

    first = [t.title for t in history.list()]
    second = [t.title for t in history]
    assert first == second == ["z", "y", "x"]
    assert len(history) == 3


def test_empty_history() -> None:
    history = CompletedTaskHistory()
    assert list(history.list()) == []
    assert len(history) == 0


def test_urgent_queue_is_fifo(make_task) -> None:
    queue = UrgentTaskQueue()
    a, b, c = make_task("A"), make_task("B"), make_task("C")

    queue.enqueue(a)
    queue.enqueue(b)
    queue.enqueue(c)

    assert list(queue.list()) == [a, b, c]
    assert list(queue.list()) == [a, b, c]
    assert len(queue) == 3


def test_urgent_queue_accepts_duplicates_and_many_items(make_task) -> None:
    queue = UrgentTaskQueue()
    task = make_task("same")
    for _ in range(250):
        queue.enqueue(task)

    assert len(queue) == 250
    assert all(t is task for t in queue)
