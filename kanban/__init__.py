"""Flask application factory with OpenTelemetry instrumentation."""

import logging
import os

from flask import Flask

from kanban.extensions import cors, db, ma


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Schema migrations run before the app is returned, retrying while the
    database is unreachable.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    # Initialize telemetry BEFORE creating Flask app
    if not os.getenv("OTEL_SDK_DISABLED"):
        from kanban.telemetry import get_otel_log_handler, instrument_flask_app, setup_telemetry

        setup_telemetry()

    app = Flask(__name__)

    # Instrument Flask app (needed for Gunicorn worker forks)
    if not os.getenv("OTEL_SDK_DISABLED"):
        instrument_flask_app(app)

    if config_class is None:
        from kanban.config import Config

        config_class = Config
    app.config.from_object(config_class)

    db.init_app(app)
    ma.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    from kanban.routes import board_bp, health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(board_bp)

    from kanban.errors import register_error_handlers

    register_error_handlers(app)

    from kanban.cli import register_commands

    register_commands(app)

    if not os.getenv("OTEL_SDK_DISABLED"):
        from kanban.middleware import register_metrics_middleware

        register_metrics_middleware(app)

        # Attach OTel log handler after app setup
        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    _configure_logging()

    from kanban.migrations import upgrade_with_retry

    upgrade_with_retry(app)

    return app


def _configure_logging() -> None:
    """Configure logging for the application."""
    # App loggers - propagate to root (where OTel handler is)
    logging.getLogger("kanban").setLevel(logging.DEBUG)
    logging.getLogger("kanban").propagate = True

    # Reduce noise from framework loggers
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").propagate = False

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
