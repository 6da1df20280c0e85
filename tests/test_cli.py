"""Tests for the command-line entry points."""

from datetime import datetime
from unittest.mock import patch

from click.testing import CliRunner

from kanban.cli import board
from kanban.client import Card


def test_migrate_up_to_date(app):
    result = app.test_cli_runner().invoke(args=["migrate"])
    assert result.exit_code == 0
    assert "Schema is up to date" in result.output


@patch("kanban.cli.TaskApi")
def test_board_prints_columns(mock_api_cls):
    api = mock_api_cls.return_value.__enter__.return_value
    api.get_tasks.return_value = [
        Card(id="1", title="Write docs", status="todo", deadline=datetime(2000, 1, 1)),
        Card(id="2", title="Review", status="in_progress"),
    ]

    result = CliRunner().invoke(board, ["--api-url", "http://kanban.test"])

    assert result.exit_code == 0
    mock_api_cls.assert_called_once_with(base_url="http://kanban.test")
    assert "To Do (1)" in result.output
    assert "Write docs  due 2000-01-01 00:00 [overdue]" in result.output
    assert "In Progress (1)" in result.output
    assert "Review  due -" in result.output
    assert "Done (0)" in result.output


@patch("kanban.cli.TaskApi")
def test_board_reads_api_url_from_environment(mock_api_cls):
    mock_api_cls.return_value.__enter__.return_value.get_tasks.return_value = []

    result = CliRunner().invoke(board, [], env={"KANBAN_API_URL": "http://board.internal"})

    assert result.exit_code == 0
    mock_api_cls.assert_called_once_with(base_url="http://board.internal")


@patch("kanban.cli.TaskApi")
def test_board_does_not_touch_the_database(mock_api_cls, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@127.0.0.1:1/none")
    mock_api_cls.return_value.__enter__.return_value.get_tasks.return_value = []

    with (
        patch("kanban.create_app") as create_app,
        patch("kanban.migrations.upgrade_with_retry") as upgrade,
    ):
        result = CliRunner().invoke(board, ["--api-url", "http://kanban.test"])

    assert result.exit_code == 0
    create_app.assert_not_called()
    upgrade.assert_not_called()
    assert "Done (0)" in result.output
