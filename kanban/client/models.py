"""Client-side task records."""

from dataclasses import dataclass
from datetime import datetime

from marshmallow import EXCLUDE, Schema, fields, post_load

from kanban.board import is_overdue


@dataclass
class Card:
    """A task as the board holds it in memory."""

    id: str
    title: str
    status: str
    description: str = ""
    deadline: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_overdue(self, now: datetime | None = None) -> bool:
        return is_overdue(self, now)


class CardSchema(Schema):
    """Maps API task JSON to and from Card."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Str(required=True)
    title = fields.Str(required=True)
    description = fields.Str(load_default="", allow_none=True)
    status = fields.Str(required=True)
    deadline = fields.DateTime(load_default=None, allow_none=True, format="iso")
    created_at = fields.DateTime(
        load_default=None, allow_none=True, format="iso", data_key="createdAt"
    )
    updated_at = fields.DateTime(
        load_default=None, allow_none=True, format="iso", data_key="updatedAt"
    )

    @post_load
    def make_card(self, data: dict, **kwargs) -> Card:
        data["description"] = data.get("description") or ""
        return Card(**data)
