"""
Spotify API data operations.

Read-only calls used by the forwarder: profile, playlists, playlist
items and top items. Responses are returned as decoded JSON; reshaping
happens in the services layer.
"""

import logging
from typing import Any, Dict, List, Optional

from .http_client import SpotifyHTTPClient

logger = logging.getLogger(__name__)


class SpotifyAPI:
    """
    Spotify Web API client for data operations.

    Example:
        with SpotifyAPI(access_token) as api:
            profile = api.get_current_user()
            items = api.get_playlist_items("37i9dQZF1DXcBWIGoYBM5M")
    """

    PLAYLISTS_PAGE_SIZE = 50
    PLAYLIST_ITEMS_PAGE_SIZE = 100
    TOP_ITEMS_LIMIT = 50
    TOP_ITEMS_TIME_RANGE = "long_term"

    def __init__(
        self,
        access_token: str,
        http_client: Optional[SpotifyHTTPClient] = None,
    ):
        """
        Initialize the API client.

        Args:
            access_token: Bearer token taken from the caller's cookie/header.
            http_client: Optional pre-built client (used by tests).
        """
        self._http = http_client or SpotifyHTTPClient(access_token)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SpotifyAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # =========================================================================
    # User Operations
    # =========================================================================

    def get_current_user(self) -> Dict[str, Any]:
        """Get the current user's profile (``GET /me``)."""
        user = self._http.get("/me")
        logger.debug(f"Retrieved user: {(user or {}).get('id', 'Unknown')}")
        return user

    def get_top_artists(self) -> Dict[str, Any]:
        """Get the user's long-term top artists page."""
        return self._get_top_items("artists")

    def get_top_tracks(self) -> Dict[str, Any]:
        """Get the user's long-term top tracks page."""
        return self._get_top_items("tracks")

    def _get_top_items(self, kind: str) -> Dict[str, Any]:
        return self._http.get(
            f"/me/top/{kind}",
            params={
                "limit": self.TOP_ITEMS_LIMIT,
                "time_range": self.TOP_ITEMS_TIME_RANGE,
            },
        )

    # =========================================================================
    # Playlist Operations
    # =========================================================================

    def get_user_playlists(self) -> Dict[str, Any]:
        """
        Get the first page of the user's playlists.

        Returns:
            The raw paging object from ``GET /me/playlists``.
        """
        return self._http.get(
            "/me/playlists", params={"limit": self.PLAYLISTS_PAGE_SIZE}
        )

    def get_playlist_items(self, playlist_id: str) -> List[Dict[str, Any]]:
        """
        Get every item of a playlist, following pagination to the end.

        Args:
            playlist_id: The Spotify playlist ID.

        Returns:
            List of raw playlist item objects (``{"track": {...}, ...}``).

        Raises:
            SpotifyAPIError: If any page fails.
        """
        items = self._http.get_all_pages(
            f"/playlists/{playlist_id}/tracks",
            params={"limit": self.PLAYLIST_ITEMS_PAGE_SIZE},
        )
        logger.debug(
            f"Retrieved {len(items)} items from playlist {playlist_id}"
        )
        return items
