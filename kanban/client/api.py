"""HTTP client for the task API."""

import os
from datetime import datetime

import httpx
from marshmallow import ValidationError

from kanban.board import TaskStatus
from kanban.client.models import Card, CardSchema


DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_TIMEOUT = 10.0


class TaskApiError(Exception):
    """Raised when a task API call fails for any reason."""


class TaskApi:
    """Thin wrapper over the four task endpoints.

    The base URL defaults to the KANBAN_API_URL environment variable.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("KANBAN_API_URL") or DEFAULT_API_URL).rstrip("/")
        if timeout is None:
            timeout = float(os.getenv("KANBAN_API_TIMEOUT", DEFAULT_TIMEOUT))
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "TaskApi":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TaskApiError(f"{method} {path} failed: {exc}") from exc
        return response

    def _load(self, response: httpx.Response, many: bool = False):
        try:
            return CardSchema(many=many).load(response.json())
        except (ValueError, ValidationError) as exc:
            raise TaskApiError(f"Malformed task payload: {exc}") from exc

    def get_tasks(self) -> list[Card]:
        """Fetch every task.

        Returns:
            Cards in store order.

        Raises:
            TaskApiError: If the request fails or the payload is malformed.
        """
        return self._load(self._request("GET", "/api/tasks"), many=True)

    def create_task(
        self,
        title: str,
        description: str = "",
        status: str = TaskStatus.TODO,
        deadline: datetime | None = None,
    ) -> Card:
        """Create a task.

        Args:
            title: Task title.
            description: Task description.
            status: Initial status.
            deadline: Optional deadline, sent as ISO 8601.

        Returns:
            The created card with its server-assigned id and timestamps.

        Raises:
            TaskApiError: If the request fails or the payload is malformed.
        """
        payload = {
            "title": title,
            "description": description,
            "status": status,
            "deadline": deadline.isoformat() if deadline else None,
        }
        return self._load(self._request("POST", "/api/tasks", json=payload))

    def update_task(self, card: Card) -> None:
        """Replace a task's title, description, status and deadline.

        Args:
            card: Card whose fields are sent.

        Raises:
            TaskApiError: If the request fails.
        """
        self._request("PUT", f"/api/tasks/{card.id}", json=CardSchema().dump(card))

    def delete_task(self, task_id: str) -> None:
        """Delete a task.

        Args:
            task_id: Task id.

        Raises:
            TaskApiError: If the request fails.
        """
        self._request("DELETE", f"/api/tasks/{task_id}")
