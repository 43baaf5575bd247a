"""
Lightweight HTTP client for the Spotify Web API.

Wraps requests.Session with the bearer header and pagination support.
Failures are surfaced immediately; nothing is retried.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import RequestException

from .exceptions import SpotifyAPIError, SpotifyTokenExpiredError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.spotify.com/v1"
REQUEST_TIMEOUT = 30  # seconds


class SpotifyHTTPClient:
    """
    HTTP client for Spotify Web API requests.

    Maps a 401 to SpotifyTokenExpiredError and every other non-2xx
    response or network error to SpotifyAPIError.
    """

    def __init__(self, access_token: str):
        """
        Initialize the HTTP client.

        Args:
            access_token: Bearer token for API requests.
        """
        self._session = requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        })

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "SpotifyHTTPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, path: str, params: Optional[Dict] = None) -> Any:
        """Send a GET request to a path relative to BASE_URL."""
        return self._request_url("GET", f"{BASE_URL}{path}", params=params)

    def get_all_pages(
        self,
        path: str,
        params: Optional[Dict] = None,
        items_key: str = "items",
    ) -> List[Dict]:
        """
        Fetch all pages of a paginated endpoint.

        Follows the ``next`` URL in each response until exhausted. Pages
        are requested one after another; a failing page aborts the whole
        fetch.

        Args:
            path: Initial API path (e.g. ``/playlists/{id}/tracks``).
            params: Optional query parameters for the first request.
            items_key: Key containing the list items (default ``items``).

        Returns:
            Concatenated list of all items across pages.
        """
        all_items: List[Dict] = []
        data = self.get(path, params=params)
        pages = 1

        while True:
            if data and items_key in data:
                all_items.extend(data[items_key] or [])

            next_url = data.get("next") if data else None
            if not next_url:
                break

            # ``next`` embeds its own offset/limit params
            data = self._request_url("GET", next_url)
            pages += 1

        logger.debug(
            "Fetched %d items from %s across %d pages",
            len(all_items), path, pages,
        )
        return all_items

    def _request_url(
        self,
        method: str,
        url: str,
        params: Optional[Dict] = None,
    ) -> Any:
        """Execute a single HTTP request and decode the JSON body."""
        try:
            response = self._session.request(
                method, url, params=params, timeout=REQUEST_TIMEOUT,
            )
        except RequestException as e:
            logger.error("Network error calling Spotify %s: %s", url, e)
            raise SpotifyAPIError(f"Network error: {e}")

        if response.status_code == 204:
            return None
        if response.ok:
            try:
                return response.json()
            except ValueError:
                raise SpotifyAPIError(
                    f"Invalid JSON from {url}",
                    status_code=response.status_code,
                )

        try:
            body = response.json()
            msg = body.get("error", {}).get("message", response.text)
        except Exception:
            msg = response.text
        logger.warning(
            "Spotify API error %d for %s: %s",
            response.status_code, url, msg,
        )

        if response.status_code == 401:
            raise SpotifyTokenExpiredError(f"Token expired or invalid: {msg}")
        raise SpotifyAPIError(
            f"API error {response.status_code}: {msg}",
            status_code=response.status_code,
        )
