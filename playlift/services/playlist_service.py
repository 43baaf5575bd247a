"""
Playlist service for the forwarder's playlist endpoints.

Passes the playlist listing through and builds the artist-sorted view
of a playlist's tracks.
"""

import logging
from typing import Any, Dict

from playlift.models.track import sort_by_first_artist, tracks_from_items
from playlift.services.base import call_upstream
from playlift.spotify.api import SpotifyAPI

logger = logging.getLogger(__name__)


class PlaylistService:
    """Service for Spotify playlist operations."""

    def __init__(self, api: SpotifyAPI):
        """
        Initialize the playlist service.

        Args:
            api: A SpotifyAPI bound to the caller's access token.
        """
        self._api = api

    def get_user_playlists(self) -> Dict[str, Any]:
        """
        Fetch the user's playlists page, unchanged.

        Raises:
            Unauthenticated: If Spotify rejected the token.
            UpstreamFailure: For any other failure.
        """
        return call_upstream(
            "get user playlists",
            self._api.get_user_playlists,
            failure_message="Failed to fetch playlists.",
        )

    def get_sorted_tracks(self, playlist_id: str) -> Dict[str, Any]:
        """
        Fetch every track of a playlist, sorted by first artist name.

        All pages are fetched before anything is returned; a failing
        page fails the whole call.

        Returns:
            ``{"playlist_id": ..., "sorted_tracks": [...]}``

        Raises:
            Unauthenticated: If Spotify rejected the token.
            UpstreamFailure: If any page fetch fails.
        """
        items = call_upstream(
            f"get tracks for playlist {playlist_id}",
            self._api.get_playlist_items,
            playlist_id,
            failure_message="Failed to fetch playlist tracks.",
        )
        tracks = sort_by_first_artist(tracks_from_items(items))
        logger.info(
            f"Sorted {len(tracks)} tracks for playlist {playlist_id}"
        )
        return {
            "playlist_id": playlist_id,
            "sorted_tracks": [track.to_dict() for track in tracks],
        }
