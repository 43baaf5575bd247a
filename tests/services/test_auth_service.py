"""
Tests for AuthService.

Tests cover state generation and matching, login URL building, code
exchange and refresh error translation.
"""

import pytest
from unittest.mock import Mock
from urllib.parse import urlparse, parse_qs

from playlift.cookies import CookiePolicy
from playlift.errors import Unauthenticated, UpstreamFailure
from playlift.services import AuthService
from playlift.settings import PlayliftSettings
from playlift.spotify.auth import TokenInfo
from playlift.spotify.credentials import SpotifyCredentials
from playlift.spotify.exceptions import SpotifyAuthError, SpotifyTokenError


@pytest.fixture
def settings():
    return PlayliftSettings(
        credentials=SpotifyCredentials(
            'test_client_id', 'test_client_secret', 'http://localhost:5000/callback'
        ),
        frontend_uri='http://frontend.test',
        cookie_policy=CookiePolicy(),
        secret_key='secret',
    )


@pytest.fixture
def mock_auth_manager():
    return Mock()


class TestState:

    def test_generate_state_is_random(self):
        states = {AuthService.generate_state() for _ in range(20)}
        assert len(states) == 20

    def test_generate_state_is_url_safe(self):
        state = AuthService.generate_state()
        assert len(state) >= 16
        assert all(c.isalnum() or c in '-_' for c in state)

    def test_matching_state(self):
        assert AuthService.state_matches('abc', 'abc') is True

    @pytest.mark.parametrize('stored, returned', [
        ('abc', 'abd'),
        (None, 'abc'),
        ('abc', None),
        (None, None),
        ('', ''),
    ])
    def test_mismatched_or_missing_state(self, stored, returned):
        assert AuthService.state_matches(stored, returned) is False


class TestBeginLogin:

    def test_url_carries_state(self, settings):
        state, url = AuthService(settings).begin_login()

        params = parse_qs(urlparse(url).query)
        assert params['state'] == [state]
        assert params['response_type'] == ['code']
        assert params['client_id'] == ['test_client_id']

    def test_show_dialog_from_settings(self, mock_auth_manager):
        settings = PlayliftSettings(
            credentials=SpotifyCredentials('id', 'secret', 'http://x/callback'),
            frontend_uri='http://frontend.test',
            cookie_policy=CookiePolicy(),
            secret_key='secret',
            show_dialog=True,
        )
        mock_auth_manager.get_auth_url.return_value = 'https://accounts.spotify.com/authorize?x'

        state, _ = AuthService(settings, mock_auth_manager).begin_login()

        mock_auth_manager.get_auth_url.assert_called_once_with(state, show_dialog=True)


class TestExchangeCode:

    def test_success(self, settings, mock_auth_manager):
        token = TokenInfo('acc', 'Bearer', 3600, 'ref')
        mock_auth_manager.exchange_code.return_value = token

        assert AuthService(settings, mock_auth_manager).exchange_code('code') is token

    @pytest.mark.parametrize('error', [
        SpotifyTokenError('rejected'),
        SpotifyAuthError('missing code'),
    ])
    def test_failure_is_upstream_failure(self, settings, mock_auth_manager, error):
        mock_auth_manager.exchange_code.side_effect = error

        with pytest.raises(UpstreamFailure):
            AuthService(settings, mock_auth_manager).exchange_code('code')


class TestRefresh:

    def test_success(self, settings, mock_auth_manager):
        token = TokenInfo('new', 'Bearer', 3600, 'ref')
        mock_auth_manager.refresh_token.return_value = token

        assert AuthService(settings, mock_auth_manager).refresh('ref') is token
        mock_auth_manager.refresh_token.assert_called_once_with('ref')

    @pytest.mark.parametrize('missing', [None, ''])
    def test_missing_refresh_token(self, settings, mock_auth_manager, missing):
        with pytest.raises(Unauthenticated):
            AuthService(settings, mock_auth_manager).refresh(missing)
        mock_auth_manager.refresh_token.assert_not_called()

    def test_rejected_refresh(self, settings, mock_auth_manager):
        mock_auth_manager.refresh_token.side_effect = SpotifyTokenError('revoked')

        with pytest.raises(UpstreamFailure):
            AuthService(settings, mock_auth_manager).refresh('ref')
