"""
Client-facing error kinds.

Every failure a handler reports is one of these four classes. The
global error handlers turn them into the JSON envelope
``{"success": false, "error": <message>, "category": <category>}``.
"""


class PlayliftError(Exception):
    """Base class for errors returned to the browser."""

    status_code = 500
    category = "error"
    default_message = "An unexpected error occurred."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class BadRequest(PlayliftError):
    status_code = 400
    category = "bad_request"
    default_message = "Bad request."


class Unauthenticated(PlayliftError):
    status_code = 401
    category = "unauthenticated"
    default_message = "Not authenticated. Please log in."


class NotFound(PlayliftError):
    status_code = 404
    category = "not_found"
    default_message = "Resource not found."


class UpstreamFailure(PlayliftError):
    status_code = 500
    category = "upstream_failure"
    default_message = "Failed to fetch data from Spotify."
