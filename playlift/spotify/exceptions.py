"""
Spotify module exceptions.

Provides a clean exception hierarchy for Spotify API operations.
"""

from typing import Optional


class SpotifyError(Exception):
    """Base exception for all Spotify-related errors."""
    pass


class SpotifyAuthError(SpotifyError):
    """Raised when authentication/authorization fails."""
    pass


class SpotifyTokenError(SpotifyAuthError):
    """Raised when token operations fail."""
    pass


class SpotifyTokenExpiredError(SpotifyTokenError):
    """Raised when the Web API rejects the bearer token (HTTP 401)."""
    pass


class SpotifyAPIError(SpotifyError):
    """Raised when a Spotify API call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
