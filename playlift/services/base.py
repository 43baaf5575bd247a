"""
Shared service utilities.

Converts Spotify-layer exceptions into the client-facing error kinds
so every forwarding service reports failures the same way.
"""

import logging
from typing import Any, Callable, Optional, Type

from playlift.errors import PlayliftError, Unauthenticated, UpstreamFailure
from playlift.spotify.exceptions import SpotifyError, SpotifyTokenExpiredError

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."


def call_upstream(
    operation_name: str,
    func: Callable[..., Any],
    *args,
    failure_class: Type[PlayliftError] = UpstreamFailure,
    failure_message: Optional[str] = None,
    **kwargs,
) -> Any:
    """
    Run a Spotify call and translate its failures.

    A rejected token (upstream 401) becomes Unauthenticated. Any other
    Spotify failure becomes ``failure_class``. Nothing is retried.

    Args:
        operation_name: Human-readable description used in log lines.
        func: The Spotify API method to call.
        failure_class: Error kind raised for non-auth failures.
        failure_message: Message for ``failure_class``; its default
            message when omitted.

    Raises:
        Unauthenticated: If Spotify rejected the access token.
        PlayliftError: ``failure_class`` for every other failure.
    """
    try:
        return func(*args, **kwargs)
    except SpotifyTokenExpiredError as e:
        logger.warning("Failed to %s: %s", operation_name, e)
        raise Unauthenticated(SESSION_EXPIRED_MESSAGE)
    except SpotifyError as e:
        logger.error("Failed to %s: %s", operation_name, e)
        raise failure_class(failure_message)
