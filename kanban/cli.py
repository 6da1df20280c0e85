"""Command-line entry points.

``flask --app kanban migrate`` runs against the server's database. The
``kanban-board`` script is a pure API client and never builds the Flask app.
"""

import click
from flask import Flask

from kanban.board import COLUMN_TITLES
from kanban.client import BoardView, TaskApi


def register_commands(app: Flask) -> None:
    """Attach the server-side commands to ``flask --app kanban``.

    Args:
        app: Flask application instance.
    """

    @app.cli.command("migrate")
    def migrate_command() -> None:
        """Apply pending schema migrations."""
        from kanban.migrations import upgrade_with_retry

        applied = upgrade_with_retry(app)
        click.echo(f"Applied: {', '.join(applied)}" if applied else "Schema is up to date")


@click.command("kanban-board")
@click.option("--api-url", envvar="KANBAN_API_URL", default=None, help="Task API base URL.")
def board(api_url: str | None) -> None:
    """Print the board columns fetched from the task API."""
    with TaskApi(base_url=api_url) as api:
        view = BoardView(api)
        view.load()

    for status, cards in view.columns().items():
        click.echo(f"{COLUMN_TITLES[status]} ({len(cards)})")
        for card in cards:
            deadline = card.deadline.strftime("%Y-%m-%d %H:%M") if card.deadline else "-"
            marker = " [overdue]" if card.is_overdue() else ""
            click.echo(f"  {card.title}  due {deadline}{marker}")
