"""Pytest fixtures for Flask application testing."""

import os

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    """Create test application."""
    from kanban import create_app
    from kanban.config import TestConfig

    app = create_app(TestConfig)
    app.config["TESTING"] = True

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from kanban.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def make_task(client, db):
    """Create a task through the API and return its JSON."""

    def _make_task(title="Test Task", **fields):
        response = client.post("/api/tasks", json={"title": title, **fields})
        assert response.status_code == 201
        return response.get_json()

    return _make_task
