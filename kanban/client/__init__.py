"""HTTP client and board view state for the task API."""

from kanban.client.api import TaskApi, TaskApiError
from kanban.client.models import Card, CardSchema
from kanban.client.view import BoardView


__all__ = ["TaskApi", "TaskApiError", "Card", "CardSchema", "BoardView"]
