"""Error handlers with OpenTelemetry trace context."""

from flask import Flask, jsonify
from opentelemetry import trace


def error_response(message: str, status_code: int) -> tuple:
    """Create error response with trace context.

    Use this function in routes instead of returning jsonify directly.

    Args:
        message: Error message.
        status_code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    response = {"error": message}

    trace_id = _current_trace_id()
    if trace_id:
        response["trace_id"] = trace_id

    return jsonify(response), status_code


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(400)
    def bad_request(error):
        return _make_error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return _make_error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return _make_error_response("Method not allowed", 405)

    @app.errorhandler(415)
    def unsupported_media_type(error):
        return _make_error_response("Unsupported media type", 415)

    @app.errorhandler(500)
    def internal_error(error):
        return _make_error_response("Internal server error", 500)


def _current_trace_id() -> str | None:
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        return format(span_context.trace_id, "032x")
    return None


def _make_error_response(message: str, status_code: int) -> tuple:
    """Create error response with trace context.

    Args:
        message: Error message.
        status_code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    response = {
        "error": message,
        "status": status_code,
    }

    # Add trace ID for debugging
    trace_id = _current_trace_id()
    if trace_id:
        response["trace_id"] = trace_id

    return jsonify(response), status_code
