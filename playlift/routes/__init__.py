"""
Flask routes package for Playlift.

This module handles HTTP requests and responses only.
All business logic is delegated to the services layer.

The single `main` Blueprint is split across feature modules. All
modules import `main` from this package and register routes on it.
"""

import functools
import logging
from typing import Optional
from urllib.parse import urlencode

from flask import Blueprint, current_app, redirect, request

from playlift.cookies import CookieJar
from playlift.errors import Unauthenticated
from playlift.settings import PlayliftSettings
from playlift.spotify.api import SpotifyAPI

logger = logging.getLogger(__name__)
main = Blueprint("main", __name__)

SETTINGS_EXTENSION = "playlift"
COOKIE_JAR_EXTENSION = "playlift.cookies"


# =============================================================================
# Helper Functions (shared across all route modules)
# =============================================================================


def get_settings() -> PlayliftSettings:
    """Return the settings built by create_app."""
    settings = current_app.extensions.get(SETTINGS_EXTENSION)
    if settings is None:
        raise RuntimeError(
            "Playlift is not configured; check the Spotify environment variables"
        )
    return settings


def get_cookie_jar() -> CookieJar:
    get_settings()
    return current_app.extensions[COOKIE_JAR_EXTENSION]


def frontend_redirect(error: Optional[str] = None):
    """Redirect to the frontend, optionally with an ``error`` flag."""
    url = get_settings().frontend_uri
    if error:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{urlencode({'error': error})}"
    return redirect(url)


def get_access_token() -> Optional[str]:
    """
    Find the caller's access token.

    The ``access_token`` cookie wins; an ``Authorization: Bearer``
    header is accepted for clients that do not use cookies.
    """
    token = get_cookie_jar().get_access_token(request)
    if token:
        return token

    scheme, _, value = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return None


def require_access_token(f):
    """
    Decorator that rejects unauthenticated requests before any upstream call.

    Injects ``api`` (a SpotifyAPI bound to the caller's token) as a
    keyword argument and closes it when the handler returns.

    Usage::

        @main.route("/endpoint")
        @require_access_token
        def my_route(api=None):
            ...
    """
    @functools.wraps(f)
    def decorated_function(*args, **kwargs):
        token = get_access_token()
        if not token:
            logger.debug(f"Rejected unauthenticated request to {request.path}")
            raise Unauthenticated()

        with SpotifyAPI(token) as api:
            kwargs["api"] = api
            return f(*args, **kwargs)

    return decorated_function


# =============================================================================
# Import route modules to register their routes on the Blueprint.
# These must be at the bottom to avoid circular imports.
# =============================================================================

from playlift.routes import (  # noqa: E402, F401
    core,
    auth,
    library,
)
