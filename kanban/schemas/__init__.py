"""Marshmallow schemas for serialization and validation."""

from kanban.schemas.task import TaskSchema


__all__ = ["TaskSchema"]
