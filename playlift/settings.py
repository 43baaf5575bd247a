"""
Immutable runtime settings.

Built once from the Flask config in ``create_app`` and read by the
route handlers, so handlers never consult the environment directly.
"""

from dataclasses import dataclass, field
from typing import Tuple

from playlift.cookies import CookiePolicy
from playlift.spotify.auth import DEFAULT_SCOPES
from playlift.spotify.credentials import SpotifyCredentials


@dataclass(frozen=True)
class PlayliftSettings:
    """
    Everything the auth proxy and forwarder need to handle a request.

    Attributes:
        credentials: Spotify client id, secret and redirect URI.
        frontend_uri: Origin the browser is redirected back to.
        cookie_policy: Flags for the state and token cookies.
        secret_key: Key used to sign cookies.
        scopes: OAuth scopes requested on login.
        show_dialog: Force the Spotify consent screen on every login.
    """

    credentials: SpotifyCredentials
    frontend_uri: str
    cookie_policy: CookiePolicy
    secret_key: object = field(repr=False)
    scopes: Tuple[str, ...] = tuple(DEFAULT_SCOPES)
    show_dialog: bool = False

    def __post_init__(self):
        if not self.frontend_uri:
            raise ValueError("frontend_uri is required")
        if self.cookie_policy.signed and not self.secret_key:
            raise ValueError("secret_key is required for signed cookies")

    @classmethod
    def from_flask_config(cls, config: dict) -> "PlayliftSettings":
        """
        Create settings from Flask app config.

        Raises:
            ValueError: If required values are missing or inconsistent.
        """
        samesite = config.get("COOKIE_SAMESITE")
        policy = CookiePolicy(
            secure=bool(config.get("COOKIE_SECURE", True)),
            samesite=samesite if samesite else None,
            signed=bool(config.get("COOKIE_SIGNED", True)),
            state_max_age=int(config.get("STATE_COOKIE_MAX_AGE", 600)),
            refresh_max_age=int(
                config.get("REFRESH_COOKIE_MAX_AGE", 30 * 24 * 3600)
            ),
        )
        return cls(
            credentials=SpotifyCredentials.from_flask_config(config),
            frontend_uri=(config.get("FRONTEND_URI") or "").rstrip("/"),
            cookie_policy=policy,
            secret_key=config.get("SECRET_KEY"),
            show_dialog=bool(config.get("SPOTIFY_SHOW_DIALOG", False)),
        )
