"""
Cookie storage for the OAuth state and the token set.

The browser's cookie jar is the only place tokens live. When signing is
enabled, values are wrapped with itsdangerous so a tampered cookie reads
as absent.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import Request, Response
from itsdangerous import BadSignature, URLSafeSerializer

from playlift.spotify.auth import TokenInfo

logger = logging.getLogger(__name__)

STATE_COOKIE = "spotify_auth_state"
ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"

_SIGNING_SALT = "playlift-cookie"


@dataclass(frozen=True)
class CookiePolicy:
    """
    Flags applied to every cookie Playlift sets.

    Attributes:
        secure: Only send over HTTPS.
        samesite: ``"Lax"``, ``"Strict"``, ``"None"`` or None to omit.
        signed: Sign values with the app secret.
        state_max_age: Lifetime of the OAuth state cookie, in seconds.
        refresh_max_age: Lifetime of the refresh-token cookie, in seconds.
    """

    secure: bool = True
    samesite: Optional[str] = "Lax"
    signed: bool = True
    state_max_age: int = 600
    refresh_max_age: int = 30 * 24 * 3600

    def __post_init__(self):
        if self.samesite is not None and self.samesite not in (
            "Lax", "Strict", "None"
        ):
            raise ValueError(f"Invalid SameSite value: {self.samesite!r}")
        if self.samesite == "None" and not self.secure:
            raise ValueError("SameSite=None cookies must also be Secure")


class CookieJar:
    """Reads and writes Playlift's cookies under a CookiePolicy."""

    def __init__(self, policy: CookiePolicy, secret_key):
        self._policy = policy
        self._serializer = (
            URLSafeSerializer(secret_key, salt=_SIGNING_SALT)
            if policy.signed
            else None
        )

    @property
    def policy(self) -> CookiePolicy:
        return self._policy

    def encode(self, value: str) -> str:
        """Return the stored form of a cookie value."""
        if self._serializer is None:
            return value
        return self._serializer.dumps(value)

    def decode(self, raw: Optional[str]) -> Optional[str]:
        """Return the original value, or None if missing or tampered with."""
        if not raw:
            return None
        if self._serializer is None:
            return raw
        try:
            value = self._serializer.loads(raw)
        except BadSignature:
            logger.warning("Discarding cookie with invalid signature")
            return None
        return value if isinstance(value, str) and value else None

    # -----------------------------------------------------------------
    # OAuth state
    # -----------------------------------------------------------------

    def set_auth_state(self, response: Response, state: str) -> None:
        self._set(response, STATE_COOKIE, state, self._policy.state_max_age)

    def get_auth_state(self, request: Request) -> Optional[str]:
        return self._get(request, STATE_COOKIE)

    def clear_auth_state(self, response: Response) -> None:
        self._delete(response, STATE_COOKIE)

    # -----------------------------------------------------------------
    # Tokens
    # -----------------------------------------------------------------

    def set_tokens(self, response: Response, token_info: TokenInfo) -> None:
        """Store the access token and, when present, the refresh token."""
        self.set_access_token(
            response, token_info.access_token, token_info.expires_in
        )
        if token_info.refresh_token:
            self._set(
                response,
                REFRESH_TOKEN_COOKIE,
                token_info.refresh_token,
                self._policy.refresh_max_age,
            )

    def set_access_token(
        self, response: Response, access_token: str, expires_in: int
    ) -> None:
        self._set(response, ACCESS_TOKEN_COOKIE, access_token, expires_in)

    def get_access_token(self, request: Request) -> Optional[str]:
        return self._get(request, ACCESS_TOKEN_COOKIE)

    def get_refresh_token(self, request: Request) -> Optional[str]:
        return self._get(request, REFRESH_TOKEN_COOKIE)

    def clear_tokens(self, response: Response) -> None:
        self._delete(response, ACCESS_TOKEN_COOKIE)
        self._delete(response, REFRESH_TOKEN_COOKIE)

    # -----------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------

    def _set(
        self, response: Response, name: str, value: str, max_age: int
    ) -> None:
        response.set_cookie(
            name,
            self.encode(value),
            max_age=max_age,
            path="/",
            httponly=True,
            secure=self._policy.secure,
            samesite=self._policy.samesite,
        )

    def _get(self, request: Request, name: str) -> Optional[str]:
        return self.decode(request.cookies.get(name))

    def _delete(self, response: Response, name: str) -> None:
        response.delete_cookie(
            name,
            path="/",
            httponly=True,
            secure=self._policy.secure,
            samesite=self._policy.samesite,
        )
