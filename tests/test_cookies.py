"""
Tests for CookiePolicy and CookieJar.
"""

import pytest
from flask import Flask, Response

from conftest import set_cookie_header
from playlift.cookies import (
    CookieJar,
    CookiePolicy,
    STATE_COOKIE,
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
)
from playlift.spotify.auth import TokenInfo


@pytest.fixture
def signed_jar():
    return CookieJar(CookiePolicy(secure=True, samesite='Lax'), 'secret')


@pytest.fixture
def plain_jar():
    return CookieJar(CookiePolicy(secure=True, samesite='Lax', signed=False), None)


class TestCookiePolicy:

    def test_defaults(self):
        policy = CookiePolicy()
        assert policy.secure is True
        assert policy.signed is True
        assert policy.state_max_age == 600
        assert policy.refresh_max_age == 30 * 24 * 3600

    def test_invalid_samesite(self):
        with pytest.raises(ValueError):
            CookiePolicy(samesite='sometimes')

    def test_samesite_none_requires_secure(self):
        with pytest.raises(ValueError):
            CookiePolicy(secure=False, samesite='None')


class TestSigning:

    def test_signed_round_trip(self, signed_jar):
        encoded = signed_jar.encode('token-value')
        assert encoded != 'token-value'
        assert signed_jar.decode(encoded) == 'token-value'

    def test_tampered_value_reads_as_absent(self, signed_jar):
        encoded = signed_jar.encode('token-value')
        assert signed_jar.decode(encoded[:-2] + 'xx') is None

    def test_unsigned_value_rejected_when_signing(self, signed_jar):
        assert signed_jar.decode('token-value') is None

    def test_other_secret_rejected(self, signed_jar):
        other = CookieJar(CookiePolicy(), 'other-secret')
        assert signed_jar.decode(other.encode('token-value')) is None

    def test_plain_passthrough(self, plain_jar):
        assert plain_jar.encode('token-value') == 'token-value'
        assert plain_jar.decode('token-value') == 'token-value'

    def test_empty_is_none(self, signed_jar):
        assert signed_jar.decode(None) is None
        assert signed_jar.decode('') is None


class TestSettingCookies:

    def test_set_tokens(self, plain_jar):
        response = Response()
        token = TokenInfo(
            access_token='acc', token_type='Bearer',
            expires_in=1800, refresh_token='ref',
        )

        plain_jar.set_tokens(response, token)

        access = set_cookie_header(response, ACCESS_TOKEN_COOKIE)
        refresh = set_cookie_header(response, REFRESH_TOKEN_COOKIE)
        assert access.startswith('access_token=acc;')
        assert 'Max-Age=1800' in access
        assert 'HttpOnly' in access
        assert 'Secure' in access
        assert 'SameSite=Lax' in access
        assert f'Max-Age={30 * 24 * 3600}' in refresh

    def test_set_tokens_without_refresh(self, plain_jar):
        response = Response()
        plain_jar.set_tokens(response, TokenInfo('acc', 'Bearer'))

        assert set_cookie_header(response, REFRESH_TOKEN_COOKIE) is None

    def test_auth_state_cookie(self, plain_jar):
        response = Response()
        plain_jar.set_auth_state(response, 'state123')

        header = set_cookie_header(response, STATE_COOKIE)
        assert header.startswith('spotify_auth_state=state123;')
        assert 'Max-Age=600' in header
        assert 'HttpOnly' in header

    def test_clear_tokens_expires_both(self, plain_jar):
        response = Response()
        plain_jar.clear_tokens(response)

        for name in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
            assert 'Max-Age=0' in set_cookie_header(response, name)


class TestReadingCookies:

    def test_reads_signed_cookies(self, signed_jar):
        app = Flask(__name__)
        cookie = f'{ACCESS_TOKEN_COOKIE}={signed_jar.encode("acc")}'
        with app.test_request_context('/', headers={'Cookie': cookie}):
            from flask import request
            assert signed_jar.get_access_token(request) == 'acc'
            assert signed_jar.get_refresh_token(request) is None
