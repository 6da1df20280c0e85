"""Task Marshmallow schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate

from kanban.board import TaskStatus
from kanban.models.task import TITLE_MAX_LENGTH


class TaskSchema(Schema):
    """Schema for task serialization and create/replace payloads.

    Server-assigned fields are dump-only; clients that echo them back
    (id, createdAt, updatedAt) have them silently dropped on load.
    """

    class Meta:
        unknown = EXCLUDE

    id = fields.UUID(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(max=TITLE_MAX_LENGTH))
    description = fields.Str(load_default="", allow_none=True)
    status = fields.Str(load_default=TaskStatus.TODO)
    deadline = fields.DateTime(load_default=None, allow_none=True, format="iso")
    created_at = fields.DateTime(dump_only=True, format="iso", data_key="createdAt")
    updated_at = fields.DateTime(dump_only=True, format="iso", data_key="updatedAt")
