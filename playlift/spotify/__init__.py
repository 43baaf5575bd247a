"""
Spotify integration module.

Architecture:
    - credentials.py: SpotifyCredentials for config/DI
    - auth.py: SpotifyAuthManager for the OAuth code and refresh grants
    - http_client.py: SpotifyHTTPClient, bearer-authenticated requests
    - api.py: SpotifyAPI for read-only data operations
    - exceptions.py: Exception hierarchy

Usage:
    from playlift.spotify import SpotifyAuthManager, SpotifyAPI

    auth_manager = SpotifyAuthManager(credentials)
    token_info = auth_manager.exchange_code(code)

    with SpotifyAPI(token_info.access_token) as api:
        playlists = api.get_user_playlists()
"""

from .credentials import SpotifyCredentials

from .auth import (
    SpotifyAuthManager,
    TokenInfo,
    DEFAULT_SCOPES,
)

from .api import SpotifyAPI

from .exceptions import (
    SpotifyError,
    SpotifyAuthError,
    SpotifyTokenError,
    SpotifyTokenExpiredError,
    SpotifyAPIError,
)


__all__ = [
    'SpotifyCredentials',

    'SpotifyAuthManager',
    'TokenInfo',
    'DEFAULT_SCOPES',

    'SpotifyAPI',

    'SpotifyError',
    'SpotifyAuthError',
    'SpotifyTokenError',
    'SpotifyTokenExpiredError',
    'SpotifyAPIError',
]
