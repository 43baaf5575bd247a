"""
Authentication routes: login, OAuth callback, token refresh, logout.
"""

import logging

from flask import jsonify, redirect, request

from playlift.errors import UpstreamFailure
from playlift.routes import (
    main,
    get_settings,
    get_cookie_jar,
    frontend_redirect,
)
from playlift.schemas import CallbackParams
from playlift.services import AuthService

logger = logging.getLogger(__name__)

STATE_MISMATCH = "state_mismatch"
INVALID_TOKEN = "invalid_token"


@main.route("/login")
def login():
    """Initiate Spotify OAuth flow."""
    state, auth_url = AuthService(get_settings()).begin_login()

    response = redirect(auth_url)
    get_cookie_jar().set_auth_state(response, state)
    logger.debug("Redirecting to Spotify authorization")
    return response


@main.route("/callback")
def callback():
    """Handle OAuth callback from Spotify."""
    params = CallbackParams(**request.args.to_dict())
    jar = get_cookie_jar()
    stored_state = jar.get_auth_state(request)

    if not AuthService.state_matches(stored_state, params.state):
        logger.warning(
            "OAuth state mismatch (cookie present: %s, query present: %s)",
            stored_state is not None,
            params.state is not None,
        )
        return frontend_redirect(STATE_MISMATCH)

    if params.error:
        logger.info(f"Spotify authorization denied: {params.error}")
        response = frontend_redirect(params.error)
        jar.clear_auth_state(response)
        return response

    if not params.code:
        logger.error("No authorization code in callback")
        response = frontend_redirect(INVALID_TOKEN)
        jar.clear_auth_state(response)
        return response

    try:
        token_info = AuthService(get_settings()).exchange_code(params.code)
    except UpstreamFailure:
        response = frontend_redirect(INVALID_TOKEN)
        jar.clear_auth_state(response)
        return response

    response = frontend_redirect()
    jar.clear_auth_state(response)
    jar.set_tokens(response, token_info)
    logger.info("User authenticated successfully")
    return response


@main.route("/refresh_token")
def refresh_token():
    """Exchange the refresh token for a new access token."""
    jar = get_cookie_jar()
    stored = jar.get_refresh_token(request) or request.args.get("refresh_token")

    token_info = AuthService(get_settings()).refresh(stored)

    response = jsonify({
        "access_token": token_info.access_token,
        "expires_in": token_info.expires_in,
    })
    if token_info.refresh_token != stored:
        # Spotify rotated the refresh token
        jar.set_tokens(response, token_info)
    else:
        jar.set_access_token(
            response, token_info.access_token, token_info.expires_in
        )
    return response


@main.route("/logout", methods=["GET", "POST"])
def logout():
    """Clear token cookies and return to the frontend."""
    jar = get_cookie_jar()
    response = frontend_redirect()
    jar.clear_tokens(response)
    jar.clear_auth_state(response)
    return response
