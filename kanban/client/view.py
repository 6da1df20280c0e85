"""Board view state.

The view keeps the task list in memory and renders from it. Each user
action makes one API call and only touches local state once that call
succeeds; failures are logged and otherwise ignored.
"""

import dataclasses
import logging
from datetime import datetime

from kanban.board import TaskStatus, partition_columns
from kanban.client.api import TaskApi, TaskApiError
from kanban.client.models import Card


logger = logging.getLogger(__name__)


class BoardView:
    """In-memory board state backed by the task API.

    Attributes:
        api: Client used for every store call.
        tasks: Tasks from the last load, updated after each successful action.
        editing: Card open in the edit modal, if any.
    """

    def __init__(self, api: TaskApi) -> None:
        self.api = api
        self.tasks: list[Card] = []
        self.editing: Card | None = None

    def load(self) -> None:
        """Replace local state with the store's task list."""
        try:
            self.tasks = self.api.get_tasks()
        except TaskApiError as exc:
            logger.error(f"Failed to load tasks: {exc}")

    def columns(self) -> dict[str, list[Card]]:
        """Lay out the local tasks in the three status columns.

        Returns:
            Cards per status, each column sorted by deadline.
        """
        return partition_columns(self.tasks)

    def find(self, task_id: str) -> Card | None:
        """Look up a local task by id.

        Args:
            task_id: Task id.

        Returns:
            The matching card, or None if it is not loaded.
        """
        return next((task for task in self.tasks if task.id == task_id), None)

    def _replace(self, card: Card) -> None:
        self.tasks = [card if task.id == card.id else task for task in self.tasks]

    def add_task(
        self, title: str, description: str = "", deadline: datetime | None = None
    ) -> Card | None:
        """Create a task in the To Do column.

        Args:
            title: Task title; blank titles are rejected without a call.
            description: Optional description.
            deadline: Optional deadline.

        Returns:
            The created card, or None if the title is blank or the call failed.
        """
        if not title.strip():
            return None
        try:
            card = self.api.create_task(
                title=title,
                description=description,
                status=TaskStatus.TODO,
                deadline=deadline,
            )
        except TaskApiError as exc:
            logger.error(f"Failed to add task: {exc}")
            return None
        self.tasks = [*self.tasks, card]
        return card

    def move_task(self, task_id: str, status: str) -> bool:
        """Drop a task onto another status column.

        Args:
            task_id: Task id.
            status: Status of the target column.

        Returns:
            True if the store accepted the change.
        """
        task = self.find(task_id)
        if task is None:
            return False
        moved = dataclasses.replace(task, status=status)
        try:
            self.api.update_task(moved)
        except TaskApiError as exc:
            logger.error(f"Failed to update task status: {exc}")
            return False
        self._replace(moved)
        return True

    def update_task(self, card: Card) -> bool:
        """Replace a task in the store and close the edit modal on success.

        Args:
            card: Card carrying the full new field set.

        Returns:
            True if the store accepted the change.
        """
        try:
            self.api.update_task(card)
        except TaskApiError as exc:
            logger.error(f"Failed to update task: {exc}")
            return False
        self._replace(card)
        self.editing = None
        return True

    def delete_task(self, task_id: str) -> bool:
        """Remove a task from the store and the local list.

        Args:
            task_id: Task id.

        Returns:
            True if the store deleted the task.
        """
        try:
            self.api.delete_task(task_id)
        except TaskApiError as exc:
            logger.error(f"Failed to delete task: {exc}")
            return False
        self.tasks = [task for task in self.tasks if task.id != task_id]
        return True

    # Edit modal

    def begin_edit(self, task_id: str) -> Card | None:
        """Open the edit modal for a task.

        Args:
            task_id: Task id.

        Returns:
            The card being edited, or None if it is not loaded.
        """
        self.editing = self.find(task_id)
        return self.editing

    def cancel_edit(self) -> None:
        """Close the edit modal without saving."""
        self.editing = None

    def save_edit(self, title: str, description: str, deadline: datetime | None) -> bool:
        """Persist the modal's fields; the modal stays open if saving fails."""
        if self.editing is None:
            return False
        edited = dataclasses.replace(
            self.editing, title=title, description=description, deadline=deadline
        )
        return self.update_task(edited)
