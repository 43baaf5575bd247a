"""
Playlift Services Package

Usage:
    from playlift.services import AuthService, PlaylistService, UserService

    auth = AuthService(settings)
    state, url = auth.begin_login()

    with SpotifyAPI(access_token) as api:
        sorted_view = PlaylistService(api).get_sorted_tracks(playlist_id)
"""

from playlift.services.auth_service import AuthService
from playlift.services.playlist_service import PlaylistService
from playlift.services.stats_service import StatsService
from playlift.services.user_service import UserService

__all__ = [
    "AuthService",
    "PlaylistService",
    "StatsService",
    "UserService",
]
