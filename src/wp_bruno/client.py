"""HTTP client for WordPress REST API discovery.

Fetches the API index (``GET /wp-json/``) and per-route schemas
(``OPTIONS /wp-json/<route>``). Proxy settings are read from the standard
``HTTP_PROXY``/``HTTPS_PROXY`` environment variables by httpx.
"""

import base64
import logging
import re

import httpx

from wp_bruno.exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def basic_auth_header(username: str, password: str) -> str:
    """Build a Basic auth header value.

    WordPress displays application passwords in space-separated groups;
    the spaces are not part of the password.
    """
    password = re.sub(r"\s+", "", password)
    credentials = f"{username}:{password}"
    return "Basic " + base64.b64encode(credentials.encode()).decode()


class WordPressClient:
    """Client for the discovery endpoints of a WordPress REST API."""

    def __init__(
        self,
        api_url: str,
        username: str | None = None,
        password: str | None = None,
        verify: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = api_url.rstrip("/")

        headers = {"Accept": "application/json"}
        if username and password:
            headers["Authorization"] = basic_auth_header(username, password)

        self.client = httpx.Client(
            headers=headers,
            verify=verify,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def fetch_index(self) -> dict:
        """Fetch the API index listing every route.

        Raises FetchError on transport errors, non-2xx responses or a
        non-JSON body.
        """
        url = f"{self.base_url}/"
        logger.debug("GET %s", url)
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"Error fetching WordPress schema: {e}") from e

        if not response.is_success:
            raise FetchError(
                "Error fetching WordPress schema: "
                f"Failed to fetch WordPress API index: {response.reason_phrase}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Error fetching WordPress schema: {e}") from e

    def fetch_route_schema(self, route: str) -> dict | None:
        """Fetch a route's detailed schema via OPTIONS; None if unavailable."""
        url = f"{self.base_url}{route}"
        try:
            response = self.client.options(url)
        except httpx.HTTPError as e:
            logger.warning("Error fetching schema for %s: %s", route, e)
            return None

        if not response.is_success:
            logger.warning("Failed to fetch schema for %s: %s", route, response.reason_phrase)
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Invalid schema response for %s: %s", route, e)
            return None
        return data if isinstance(data, dict) else None

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "WordPressClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
