"""Route blueprints."""

from kanban.routes.board import board_bp
from kanban.routes.health import health_bp
from kanban.routes.tasks import tasks_bp


__all__ = ["board_bp", "health_bp", "tasks_bp"]
