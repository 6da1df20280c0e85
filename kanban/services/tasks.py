"""Task store operations over the tasks table."""

import logging
import uuid
from datetime import datetime
from typing import Any

from kanban.board import as_utc
from kanban.extensions import db
from kanban.models import Task
from kanban.models.task import utcnow


logger = logging.getLogger(__name__)


def _utc_deadline(data: dict[str, Any]) -> datetime | None:
    deadline = data.get("deadline")
    return as_utc(deadline) if deadline is not None else None


class TaskNotFoundError(LookupError):
    """Raised when no task exists with the requested id."""

    def __init__(self, task_id: uuid.UUID) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


def list_tasks() -> list[Task]:
    """Return every task in creation order."""
    return db.session.query(Task).order_by(Task.created_at, Task.id).all()


def create_task(data: dict[str, Any]) -> Task:
    """Insert a new task.

    The id and both timestamps are always assigned here; callers cannot
    supply them.

    Args:
        data: Loaded task payload (title, description, status, deadline).
            Deadlines with an offset are stored as UTC; naive ones are
            taken to be UTC already.

    Returns:
        The persisted task.
    """
    now = utcnow()
    task = Task(
        id=uuid.uuid4(),
        title=data["title"],
        description=data.get("description") or "",
        status=data["status"],
        deadline=_utc_deadline(data),
        created_at=now,
        updated_at=now,
    )
    db.session.add(task)
    db.session.commit()
    return task


def _get_or_raise(task_id: uuid.UUID) -> Task:
    task = db.session.get(Task, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def replace_task(task_id: uuid.UUID, data: dict[str, Any]) -> Task:
    """Overwrite a task's editable fields and refresh its updated-at.

    Raises:
        TaskNotFoundError: If no task has this id.
    """
    task = _get_or_raise(task_id)

    task.title = data["title"]
    task.description = data.get("description") or ""
    task.status = data["status"]
    task.deadline = _utc_deadline(data)
    task.touch()

    db.session.commit()
    return task


def delete_task(task_id: uuid.UUID) -> None:
    """Remove a task.

    Raises:
        TaskNotFoundError: If no task has this id.
    """
    task = _get_or_raise(task_id)
    db.session.delete(task)
    db.session.commit()
