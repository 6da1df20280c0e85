"""Service modules."""

from kanban.services.tasks import (
    TaskNotFoundError,
    create_task,
    delete_task,
    list_tasks,
    replace_task,
)


__all__ = ["TaskNotFoundError", "list_tasks", "create_task", "replace_task", "delete_task"]
