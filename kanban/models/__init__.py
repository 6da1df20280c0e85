"""Database models."""

from kanban.models.task import Task


__all__ = ["Task"]
