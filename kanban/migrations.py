"""Startup schema migrations.

Tables are created from the models; columns added after a table first
shipped are applied as ordered, idempotent steps so existing databases
catch up without being dropped.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from flask import Flask
from sqlalchemy import DateTime, inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.engine.reflection import Inspector
from tenacity import RetryCallState, Retrying, stop_after_attempt, wait_fixed

from kanban.extensions import db


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Migration:
    """A single schema step applied once to databases that lack it."""

    name: str
    is_applied: Callable[[Inspector], bool]
    apply: Callable[[Connection], None]


def _has_column(table: str, column: str) -> Callable[[Inspector], bool]:
    def check(inspector: Inspector) -> bool:
        return any(col["name"] == column for col in inspector.get_columns(table))

    return check


def _add_task_deadline(conn: Connection) -> None:
    column_type = DateTime(timezone=True).compile(dialect=conn.dialect)
    conn.execute(text(f"ALTER TABLE tasks ADD COLUMN deadline {column_type}"))


MIGRATIONS: list[Migration] = [
    Migration(
        name="add_task_deadline",
        is_applied=_has_column("tasks", "deadline"),
        apply=_add_task_deadline,
    ),
]


def upgrade_schema() -> list[str]:
    """Create missing tables, then apply pending column migrations.

    Must be called inside an application context.

    Returns:
        Names of the migrations applied in this run.
    """
    db.create_all()

    applied: list[str] = []
    with db.engine.begin() as conn:
        for migration in MIGRATIONS:
            if migration.is_applied(inspect(conn)):
                continue
            logger.info(f"Applying migration: {migration.name}")
            migration.apply(conn)
            applied.append(migration.name)

    return applied


def _log_failed_attempt(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(f"Migration attempt {retry_state.attempt_number} failed: {exc}")


def upgrade_with_retry(app: Flask) -> list[str]:
    """Apply migrations, retrying at a fixed interval until the database is up.

    Attempts and delay come from MIGRATION_MAX_ATTEMPTS and
    MIGRATION_RETRY_DELAY. The last error is re-raised once attempts run out.

    Args:
        app: Flask application instance.

    Returns:
        Names of the migrations applied.
    """
    retrying = Retrying(
        stop=stop_after_attempt(app.config.get("MIGRATION_MAX_ATTEMPTS", 15)),
        wait=wait_fixed(app.config.get("MIGRATION_RETRY_DELAY", 2)),
        before_sleep=_log_failed_attempt,
        reraise=True,
    )

    with app.app_context():
        try:
            applied = retrying(upgrade_schema)
        except Exception:
            logger.error("Giving up on schema migrations")
            raise

    if applied:
        logger.info(f"Applied migrations: {', '.join(applied)}")
    return applied
