"""
User service: profile, top items and the listening summary.
"""

import logging
from typing import Any, Dict

from playlift.errors import Unauthenticated
from playlift.services.base import call_upstream
from playlift.services.stats_service import StatsService
from playlift.spotify.api import SpotifyAPI

logger = logging.getLogger(__name__)

AUTH_FAILED_MESSAGE = "Authentication failed. Please log in again."


class UserService:
    """Service for the current user's Spotify data."""

    def __init__(self, api: SpotifyAPI):
        self._api = api

    def get_profile(self) -> Dict[str, Any]:
        """
        Fetch the user's profile, unchanged.

        The frontend uses this call to decide whether the user is logged
        in, so every upstream failure is reported as Unauthenticated.
        """
        return call_upstream(
            "get user profile",
            self._api.get_current_user,
            failure_class=Unauthenticated,
            failure_message=AUTH_FAILED_MESSAGE,
        )

    def get_top_artists(self) -> Dict[str, Any]:
        return call_upstream(
            "get top artists",
            self._api.get_top_artists,
            failure_message="Failed to fetch top artists.",
        )

    def get_top_tracks(self) -> Dict[str, Any]:
        return call_upstream(
            "get top tracks",
            self._api.get_top_tracks,
            failure_message="Failed to fetch top tracks.",
        )

    def get_listening_summary(self) -> Dict[str, Any]:
        """
        Fetch top artists and top tracks, then aggregate them.

        Raises:
            Unauthenticated: If Spotify rejected the token.
            UpstreamFailure: If either fetch fails.
        """
        top_artists = self.get_top_artists()
        top_tracks = self.get_top_tracks()
        summary = StatsService.summarize(top_artists, top_tracks)
        logger.debug(
            f"Built listening summary with {len(summary['genre_counts'])} genres"
        )
        return summary
