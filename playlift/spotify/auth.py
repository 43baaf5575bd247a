"""
Spotify authentication and token management.

Handles the authorization URL, the authorization-code exchange and
token refresh against the Spotify Accounts service. Tokens are never
stored here; callers hand them to the browser as cookies.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional
from urllib.parse import urlencode

import requests

from .credentials import SpotifyCredentials
from .exceptions import SpotifyAuthError, SpotifyTokenError

logger = logging.getLogger(__name__)


# Scopes needed for profile, playlists and top items
DEFAULT_SCOPES = [
    "user-read-private",
    "user-read-email",
    "user-top-read",
    "user-read-recently-played",
    "playlist-read-private",
    "playlist-read-collaborative",
]

DEFAULT_EXPIRES_IN = 3600
TOKEN_REQUEST_TIMEOUT = 30  # seconds


@dataclass
class TokenInfo:
    """
    Structured container for OAuth token information.

    Mirrors the JSON body returned by the Spotify token endpoint.
    """

    access_token: str
    token_type: str
    expires_in: int = DEFAULT_EXPIRES_IN
    refresh_token: Optional[str] = None
    scope: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenInfo":
        """
        Create TokenInfo from a dictionary.

        Args:
            data: Token dictionary from Spotify OAuth.

        Returns:
            TokenInfo instance.

        Raises:
            SpotifyTokenError: If required fields are missing.
        """
        if not isinstance(data, dict):
            raise SpotifyTokenError(
                f"Token data must be a dictionary, got {type(data)}"
            )

        required = ["access_token", "token_type"]
        missing = [k for k in required if not data.get(k)]
        if missing:
            raise SpotifyTokenError(f"Token missing required fields: {missing}")

        try:
            expires_in = int(data.get("expires_in") or DEFAULT_EXPIRES_IN)
        except (TypeError, ValueError):
            raise SpotifyTokenError(
                f"Invalid expires_in: {data.get('expires_in')!r}"
            )

        return cls(
            access_token=data["access_token"],
            token_type=data["token_type"],
            expires_in=expires_in,
            refresh_token=data.get("refresh_token"),
            scope=data.get("scope"),
        )

    def __repr__(self) -> str:
        return (
            f"TokenInfo(token_type={self.token_type!r}, "
            f"expires_in={self.expires_in}, "
            f"has_refresh_token={self.refresh_token is not None})"
        )


class SpotifyAuthManager:
    """
    Manages Spotify OAuth authentication.

    Stateless regarding tokens: it builds authorization URLs and turns
    codes or refresh tokens into TokenInfo objects.

    Example:
        auth_manager = SpotifyAuthManager(credentials)
        url = auth_manager.get_auth_url(state="abc")
        token_info = auth_manager.exchange_code(code)
        token_info = auth_manager.refresh_token(token_info.refresh_token)
    """

    # Spotify OAuth endpoints
    _AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
    _TOKEN_URL = "https://accounts.spotify.com/api/token"

    def __init__(
        self,
        credentials: SpotifyCredentials,
        scopes: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the auth manager.

        Args:
            credentials: SpotifyCredentials instance with OAuth credentials.
            scopes: Optional OAuth scopes. Defaults to DEFAULT_SCOPES.
        """
        self._credentials = credentials
        self._scopes = list(scopes) if scopes else list(DEFAULT_SCOPES)
        self._scope_string = " ".join(self._scopes)

    def get_auth_url(self, state: str, show_dialog: bool = False) -> str:
        """
        Generate the Spotify authorization URL.

        Args:
            state: Anti-CSRF value echoed back on the callback.
            show_dialog: Force Spotify to show the consent screen again.

        Returns:
            The authorization URL to redirect users to.

        Raises:
            SpotifyAuthError: If no state is given.
        """
        if not state:
            raise SpotifyAuthError("A state value is required")

        params = {
            "response_type": "code",
            "client_id": self._credentials.client_id,
            "scope": self._scope_string,
            "redirect_uri": self._credentials.redirect_uri,
            "state": state,
        }
        if show_dialog:
            params["show_dialog"] = "true"

        return f"{self._AUTHORIZE_URL}?{urlencode(params)}"

    def exchange_code(self, code: str) -> TokenInfo:
        """
        Exchange an authorization code for tokens.

        Args:
            code: The authorization code from OAuth callback.

        Returns:
            TokenInfo with access and refresh tokens.

        Raises:
            SpotifyAuthError: If code is missing.
            SpotifyTokenError: If token exchange fails.
        """
        if not code:
            raise SpotifyAuthError("Authorization code is required")

        token_info = self._request_token(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self._credentials.redirect_uri,
            },
            action="exchange",
        )
        logger.info("Successfully exchanged code for token")
        return token_info

    def refresh_token(self, refresh_token: str) -> TokenInfo:
        """
        Obtain a new access token from a refresh token.

        Args:
            refresh_token: The long-lived refresh token.

        Returns:
            New TokenInfo. When Spotify does not rotate the refresh
            token, the one passed in is kept on the result.

        Raises:
            SpotifyTokenError: If refresh fails or no token is given.
        """
        if not refresh_token:
            raise SpotifyTokenError(
                "Cannot refresh: no refresh_token available"
            )

        token_info = self._request_token(
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            },
            action="refresh",
        )
        if not token_info.refresh_token:
            token_info.refresh_token = refresh_token
        logger.info("Successfully refreshed token")
        return token_info

    def _request_token(self, data: Dict[str, str], action: str) -> TokenInfo:
        """POST to the token endpoint with HTTP Basic client auth."""
        try:
            response = requests.post(
                self._TOKEN_URL,
                data=data,
                auth=self._credentials.basic_auth,
                timeout=TOKEN_REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error(f"Token {action} failed: {e}")
            raise SpotifyTokenError(f"Token {action} failed: {e}")

        if not response.ok:
            try:
                error_msg = response.json().get(
                    "error_description", response.text
                )
            except ValueError:
                error_msg = response.text
            logger.error(
                "Token %s rejected (%s): %s",
                action, response.status_code, error_msg,
            )
            raise SpotifyTokenError(
                f"Token {action} failed: {error_msg}"
            )

        try:
            token_data = response.json()
        except ValueError:
            raise SpotifyTokenError(
                f"Token {action} returned a non-JSON body"
            )
        if not token_data:
            raise SpotifyTokenError(f"No token returned from {action}")

        return TokenInfo.from_dict(token_data)
