"""
Session utilities for Frame.io and media transfer requests.

This module provides a factory for httpx clients with connection-level
retries and connection pooling.
"""

import importlib.util
import logging
from typing import Optional

import httpx
from httpx import HTTPTransport

# Connection-level retries (failed connects only, never replayed requests)
MAX_RETRIES = 3


def create_session_with_retry(
    auth: Optional[httpx.Auth] = None,
    base_url: str = "",
    timeout: float = 30.0,
    max_connections: int = 100,
) -> httpx.Client:
    """
    Create an httpx client with retry strategy and connection pooling.

    Args:
        auth: Optional httpx auth handler attached to every request
        base_url: Optional base URL prepended to relative request paths
        timeout: Total timeout in seconds (default: 30.0)
        max_connections: Maximum number of connections in the pool (default: 100)

    Returns:
        Configured httpx.Client

    Example:
        >>> client = create_session_with_retry(base_url="https://api.frame.io/v2")
        >>> response = client.get("/me")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(20, max_connections // 5),
    )
    timeout_config = httpx.Timeout(timeout, connect=10.0)

    # Enable HTTP/2 only when the optional h2 package is installed
    use_http2 = importlib.util.find_spec("h2") is not None
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    transport = HTTPTransport(limits=limits, retries=MAX_RETRIES, http2=use_http2)

    return httpx.Client(
        auth=auth,
        base_url=base_url,
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
    )


__all__ = ["create_session_with_retry"]
