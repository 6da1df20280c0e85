"""Board layout rules shared by the HTML board and the API client.

Works on any task-like object exposing ``status`` and ``deadline``
attributes, so both ORM rows and client-side cards can be laid out.
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any


class TaskStatus:
    """Wire values of the three board columns."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    ALL = (TODO, IN_PROGRESS, DONE)


COLUMN_TITLES: dict[str, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _deadline_key(task: Any) -> tuple[int, datetime]:
    deadline = task.deadline
    if deadline is None:
        return (1, datetime.max.replace(tzinfo=timezone.utc))
    return (0, as_utc(deadline))


def sort_by_deadline(tasks: Iterable[Any]) -> list[Any]:
    """Order tasks by ascending deadline, undated tasks last.

    ``sorted`` is stable, so tasks with equal keys keep their input order.
    """
    return sorted(tasks, key=_deadline_key)


def partition_columns(tasks: Iterable[Any]) -> dict[str, list[Any]]:
    """Split tasks into the fixed status columns, each sorted by deadline.

    Tasks whose status is not one of the board columns are left out.
    """
    columns: dict[str, list[Any]] = {status: [] for status in TaskStatus.ALL}
    for task in tasks:
        if task.status in columns:
            columns[task.status].append(task)
    return {status: sort_by_deadline(items) for status, items in columns.items()}


def is_overdue(task: Any, now: datetime | None = None) -> bool:
    """Check whether a task is past its deadline and not yet done.

    Args:
        task: Task-like object.
        now: Reference time. Defaults to the current UTC time.

    Returns:
        True if the task has a deadline in the past and is not done.
    """
    if task.deadline is None or task.status == TaskStatus.DONE:
        return False
    if now is None:
        now = datetime.now(timezone.utc)
    return as_utc(task.deadline) < as_utc(now)
