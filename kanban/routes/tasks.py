"""Task CRUD endpoints."""

import logging
import uuid

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError
from opentelemetry import metrics, trace

from kanban.errors import error_response
from kanban.schemas import TaskSchema
from kanban.services import tasks as task_store


logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)
meter = metrics.get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    """List all tasks.

    Returns:
        JSON array of tasks.
    """
    tasks = task_store.list_tasks()
    return jsonify(TaskSchema(many=True).dump(tasks))


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a new task.

    Client-supplied id and timestamps are ignored.

    Returns:
        JSON response with created task.
    """
    with tracer.start_as_current_span("task.create") as span:
        schema = TaskSchema()
        try:
            data = schema.load(request.get_json() or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        task = task_store.create_task(data)

        span.set_attribute("task.id", str(task.id))
        span.set_attribute("task.status", task.status)

        tasks_created.add(1, {"status": task.status})
        logger.info(f"Task created: {task.id}", extra={"task_id": str(task.id)})

        return jsonify(schema.dump(task)), 201


@tasks_bp.route("/<uuid:task_id>", methods=["PUT"])
def update_task(task_id: uuid.UUID):
    """Replace a task's title, description, status and deadline.

    Args:
        task_id: Task id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", str(task_id))

        try:
            data = TaskSchema().load(request.get_json() or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        try:
            task = task_store.replace_task(task_id, data)
        except task_store.TaskNotFoundError:
            span.set_attribute("task.found", False)
            return error_response("Task not found", 404)

        span.set_attribute("task.status", task.status)
        logger.info(f"Task updated: {task_id}", extra={"task_id": str(task_id)})

        return "", 204


@tasks_bp.route("/<uuid:task_id>", methods=["DELETE"])
def delete_task(task_id: uuid.UUID):
    """Delete a task.

    Args:
        task_id: Task id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", str(task_id))

        try:
            task_store.delete_task(task_id)
        except task_store.TaskNotFoundError:
            span.set_attribute("task.found", False)
            return error_response("Task not found", 404)

        logger.info(f"Task deleted: {task_id}", extra={"task_id": str(task_id)})

        return "", 204
