"""
Confidential-client credentials for the Spotify Accounts service.

The client secret only ever leaves the process as HTTP Basic auth on
the token endpoint; it is masked in the repr so it cannot leak into
logs.
"""

from dataclasses import dataclass
from typing import Tuple
from urllib.parse import urlsplit

_CONFIG_KEYS = {
    "client_id": "SPOTIFY_CLIENT_ID",
    "client_secret": "SPOTIFY_CLIENT_SECRET",
    "redirect_uri": "SPOTIFY_REDIRECT_URI",
}


@dataclass(frozen=True)
class SpotifyCredentials:
    """
    Client id, client secret and registered redirect URI.

    The redirect URI must match the one registered in the Spotify
    developer dashboard exactly, and be an absolute http(s) URL.
    """

    client_id: str
    client_secret: str
    redirect_uri: str

    def __post_init__(self):
        for name in _CONFIG_KEYS:
            if not getattr(self, name):
                raise ValueError(f"{name} is required")

        parts = urlsplit(self.redirect_uri)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(
                f"redirect_uri must be an absolute http(s) URL, "
                f"got {self.redirect_uri!r}"
            )

    def __repr__(self) -> str:
        return (
            f"SpotifyCredentials(client_id={self.client_id!r}, "
            f"client_secret='***', redirect_uri={self.redirect_uri!r})"
        )

    @property
    def basic_auth(self) -> Tuple[str, str]:
        """``(client_id, client_secret)`` for ``requests``' ``auth=``."""
        return self.client_id, self.client_secret

    @classmethod
    def from_flask_config(cls, config: dict) -> "SpotifyCredentials":
        """
        Read the three SPOTIFY_* keys from a Flask config mapping.

        Raises:
            ValueError: If a key is missing, empty or malformed.
        """
        return cls(**{
            field: config.get(key) or ""
            for field, key in _CONFIG_KEYS.items()
        })
