"""
Pytest configuration and shared fixtures for Playlift tests.

This module provides common fixtures used across all test modules,
including sample Spotify payloads, mock HTTP responses, and Flask app
contexts.
"""

import os

os.environ['SPOTIFY_CLIENT_ID'] = 'test_client_id'
os.environ['SPOTIFY_CLIENT_SECRET'] = 'test_client_secret'
os.environ['SPOTIFY_REDIRECT_URI'] = 'http://localhost:5000/callback'
os.environ['SECRET_KEY'] = 'test-secret-key'

import pytest  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402


TEST_CONFIG = {
    'SPOTIFY_CLIENT_ID': 'test_client_id',
    'SPOTIFY_CLIENT_SECRET': 'test_client_secret',
    'SPOTIFY_REDIRECT_URI': 'http://localhost:5000/callback',
    'FRONTEND_URI': 'http://frontend.test',
    'SECRET_KEY': 'test-secret-key',
}


# =============================================================================
# Helpers
# =============================================================================

def mock_response(status_code=200, json_data=None, headers=None, text=None):
    """Create a mock requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = json_data if json_data is not None else {}
    resp.headers = headers or {}
    resp.text = text if text is not None else (str(json_data) if json_data else "")
    return resp


def make_item(name, artists, album='Some Album', track_id=None):
    """A raw ``/playlists/{id}/tracks`` item."""
    track_id = track_id or name.lower().replace(' ', '_')
    return {
        'added_at': '2024-01-01T00:00:00Z',
        'track': {
            'id': track_id,
            'name': name,
            'uri': f'spotify:track:{track_id}',
            'artists': [{'name': artist} for artist in artists],
            'album': {'name': album},
            'external_urls': {
                'spotify': f'https://open.spotify.com/track/{track_id}'
            },
        },
    }


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_token_response():
    """A token endpoint body for the authorization-code grant."""
    return {
        'access_token': 'test_access_token_12345',
        'token_type': 'Bearer',
        'expires_in': 3600,
        'refresh_token': 'test_refresh_token_67890',
        'scope': 'user-read-private user-top-read',
    }


@pytest.fixture
def sample_user():
    """Sample Spotify user data."""
    return {
        'id': 'user123',
        'display_name': 'Test User',
        'email': 'test@example.com',
        'images': [{'url': 'https://example.com/avatar.jpg'}],
        'country': 'US',
        'product': 'premium',
        'uri': 'spotify:user:user123',
    }


@pytest.fixture
def sample_playlists_page():
    """First page of ``/me/playlists``."""
    return {
        'href': 'https://api.spotify.com/v1/me/playlists?limit=50',
        'limit': 50,
        'offset': 0,
        'total': 2,
        'next': None,
        'items': [
            {
                'id': 'playlist1',
                'name': 'Playlist One',
                'owner': {'id': 'user123'},
                'tracks': {'total': 25},
            },
            {
                'id': 'playlist2',
                'name': 'Playlist Two',
                'owner': {'id': 'other_user'},
                'tracks': {'total': 50},
            },
        ],
    }


@pytest.fixture
def sample_top_artists():
    """``/me/top/artists`` page with genre tags."""
    return {
        'items': [
            {'name': 'Artist A', 'genres': ['pop', 'rock']},
            {'name': 'Artist B', 'genres': ['pop']},
            {'name': 'Artist C', 'genres': ['jazz']},
        ],
        'next': None,
    }


@pytest.fixture
def sample_top_tracks():
    """``/me/top/tracks`` page."""
    return {
        'items': [{'name': f'Track {i}'} for i in range(1, 8)],
        'next': None,
    }


# =============================================================================
# Flask App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create a Flask application for testing."""
    from playlift import create_app

    return create_app('testing', config_overrides=dict(TEST_CONFIG))


@pytest.fixture
def client(app):
    """Provide Flask test client."""
    return app.test_client()


@pytest.fixture
def cookie_jar(app):
    """The app's CookieJar, for signing and reading cookie values."""
    from playlift.routes import COOKIE_JAR_EXTENSION

    return app.extensions[COOKIE_JAR_EXTENSION]


@pytest.fixture
def set_signed_cookie(client, cookie_jar):
    """Put a correctly signed cookie in the test client's jar."""
    def _set(name, value):
        client.set_cookie(name, cookie_jar.encode(value))
    return _set


@pytest.fixture
def authenticated_client(client, set_signed_cookie):
    """Flask test client with a valid access-token cookie pre-set."""
    set_signed_cookie('access_token', 'test_access_token')
    return client


def set_cookie_header(response, name):
    """Return the Set-Cookie header for ``name``, or None."""
    for header in response.headers.getlist('Set-Cookie'):
        if header.startswith(f'{name}='):
            return header
    return None
