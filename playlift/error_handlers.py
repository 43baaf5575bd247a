"""
Global Flask error handlers.

Provides one JSON error envelope across all endpoints by catching the
client-facing error kinds, Pydantic validation errors and HTTP errors.
"""

import logging
from flask import jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from playlift.errors import (
    PlayliftError,
    BadRequest,
    NotFound,
)

logger = logging.getLogger(__name__)


def json_error_response(message: str, status_code: int, category: str = "error"):
    """Create a standardized JSON error response."""
    return (
        jsonify({"success": False, "error": message, "category": category}),
        status_code,
    )


def register_error_handlers(app):
    """
    Register global error handlers with the Flask app.

    Args:
        app: The Flask application instance.
    """

    # =========================================================================
    # Client-facing error kinds
    # =========================================================================

    @app.errorhandler(PlayliftError)
    def handle_playlift_error(error: PlayliftError):
        """Handle BadRequest, Unauthenticated, NotFound, UpstreamFailure."""
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__}: {error.message}")
        else:
            logger.info(f"{type(error).__name__}: {error.message}")
        return json_error_response(
            error.message, error.status_code, error.category
        )

    # =========================================================================
    # Pydantic Validation Errors (400)
    # =========================================================================

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        """Handle Pydantic validation errors."""
        errors_list = []
        for err in error.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            errors_list.append(f"{field}: {err['msg']}")

        message = "; ".join(errors_list) if errors_list else "Validation failed"
        logger.warning(f"Validation error: {message}")
        return json_error_response(message, 400, BadRequest.category)

    # =========================================================================
    # HTTP Error Codes
    # =========================================================================

    @app.errorhandler(404)
    def handle_not_found(error):
        """Handle unmatched routes."""
        return json_error_response(
            NotFound.default_message, 404, NotFound.category
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        """Handle any other werkzeug HTTP error (405, 400, ...)."""
        return json_error_response(
            error.description or error.name,
            error.code or 500,
            BadRequest.category if (error.code or 500) < 500 else "error",
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        """Handle anything that escaped the handlers above."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return json_error_response(
            "An unexpected error occurred.", 500, "error"
        )

    logger.info("Global error handlers registered")
