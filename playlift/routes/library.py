"""
Forwarding routes: profile, playlists, sorted tracks and top items.

Every route here requires an access token; see require_access_token.
"""

import logging

from flask import jsonify

from playlift.routes import main, require_access_token
from playlift.schemas import PlaylistPath
from playlift.services import PlaylistService, UserService

logger = logging.getLogger(__name__)


@main.route("/me")
@require_access_token
def me(api=None):
    """Current user's Spotify profile."""
    return jsonify(UserService(api).get_profile())


@main.route("/playlists")
@require_access_token
def playlists(api=None):
    """First page (50) of the user's playlists."""
    return jsonify(PlaylistService(api).get_user_playlists())


@main.route("/playlist/<playlist_id>/sorted")
@require_access_token
def sorted_playlist(playlist_id, api=None):
    """All tracks of a playlist, ordered by first artist name."""
    path = PlaylistPath(playlist_id=playlist_id)
    return jsonify(PlaylistService(api).get_sorted_tracks(path.playlist_id))


@main.route("/me/top-artists")
@require_access_token
def top_artists(api=None):
    return jsonify(UserService(api).get_top_artists())


@main.route("/me/top-tracks")
@require_access_token
def top_tracks(api=None):
    return jsonify(UserService(api).get_top_tracks())


@main.route("/me/summary")
@require_access_token
def listening_summary(api=None):
    """Top artists, tracks and genres in one response."""
    return jsonify(UserService(api).get_listening_summary())
