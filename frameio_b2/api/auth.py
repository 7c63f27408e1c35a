"""
Bearer token authentication for the Frame.io API.

Tokens are issued outside this package (developer token or OAuth app) and
passed in through configuration; they are never refreshed here.
"""

from typing import Generator

import httpx


class BearerTokenAuth(httpx.Auth):
    """Attach a static bearer token to every request."""

    def __init__(self, token: str) -> None:
        """
        Initialize bearer authentication.

        Args:
            token: Frame.io API token
        """
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Add the Authorization header and send the request."""
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


__all__ = ["BearerTokenAuth"]
