"""
Authentication service for the Spotify OAuth flow.

Handles state generation and checking, authorization URL generation,
code exchange and token refresh.
"""

import logging
import secrets
from typing import Optional, Tuple

from playlift.errors import Unauthenticated, UpstreamFailure
from playlift.settings import PlayliftSettings
from playlift.spotify.auth import SpotifyAuthManager, TokenInfo
from playlift.spotify.exceptions import SpotifyAuthError

logger = logging.getLogger(__name__)

STATE_BYTES = 16


class AuthService:
    """Service for managing Spotify OAuth authentication."""

    def __init__(
        self,
        settings: PlayliftSettings,
        auth_manager: Optional[SpotifyAuthManager] = None,
    ):
        """
        Initialize the auth service.

        Args:
            settings: Application settings (credentials, scopes).
            auth_manager: Optional pre-built manager (used by tests).
        """
        self._settings = settings
        self._auth_manager = auth_manager or SpotifyAuthManager(
            settings.credentials, scopes=settings.scopes
        )

    @staticmethod
    def generate_state() -> str:
        """Return a fresh random anti-CSRF state value."""
        return secrets.token_urlsafe(STATE_BYTES)

    @staticmethod
    def state_matches(
        stored_state: Optional[str], returned_state: Optional[str]
    ) -> bool:
        """
        Check the state echoed by Spotify against the one we stored.

        Both must be present and equal; comparison is constant-time.
        """
        if not stored_state or not returned_state:
            return False
        return secrets.compare_digest(
            stored_state.encode("utf-8"), returned_state.encode("utf-8")
        )

    def begin_login(self) -> Tuple[str, str]:
        """
        Start the authorization-code flow.

        Returns:
            Tuple of (state, authorization URL).
        """
        state = self.generate_state()
        url = self._auth_manager.get_auth_url(
            state, show_dialog=self._settings.show_dialog
        )
        logger.debug("Generated authorization URL with fresh state")
        return state, url

    def exchange_code(self, code: str) -> TokenInfo:
        """
        Exchange an authorization code for tokens.

        Raises:
            UpstreamFailure: If Spotify rejects the code or is unreachable.
        """
        try:
            return self._auth_manager.exchange_code(code)
        except SpotifyAuthError as e:
            logger.error(f"Token exchange failed: {e}")
            raise UpstreamFailure("Failed to exchange authorization code.")

    def refresh(self, refresh_token: Optional[str]) -> TokenInfo:
        """
        Get a new access token from a refresh token.

        Raises:
            Unauthenticated: If no refresh token is available.
            UpstreamFailure: If Spotify rejects the refresh.
        """
        if not refresh_token:
            raise Unauthenticated("No refresh token. Please log in.")

        try:
            return self._auth_manager.refresh_token(refresh_token)
        except SpotifyAuthError as e:
            logger.error(f"Token refresh failed: {e}")
            raise UpstreamFailure("Failed to refresh access token.")
