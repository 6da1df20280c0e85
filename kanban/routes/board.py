"""Browser board page."""

from flask import Blueprint, render_template

from kanban.board import COLUMN_TITLES, as_utc, is_overdue, partition_columns
from kanban.models.task import utcnow
from kanban.services import tasks as task_store


board_bp = Blueprint("board", __name__)


@board_bp.route("/", methods=["GET"])
def board_page():
    """Render the three status columns with the new-task form and edit modal."""
    columns = partition_columns(task_store.list_tasks())
    return render_template(
        "board.html",
        columns=columns,
        column_titles=COLUMN_TITLES,
        is_overdue=is_overdue,
        as_utc=as_utc,
        now=utcnow(),
    )
