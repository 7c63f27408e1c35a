"""
Verification of Frame.io custom action callbacks.

Frame.io signs every callback with ``"v0=" + HMAC-SHA256(secret, "v0:" + timestamp + ":" + body)``
and sends the signature together with the request timestamp. A callback is
accepted only when the timestamp is fresh and the signature matches.
"""

import hashlib
import hmac
import logging
import math
import time
from typing import Mapping, Optional, Union

from ..exceptions import AuthenticationError
from .constants import SIGNATURE_HEADER, SIGNATURE_VERSION, TIMESTAMP_HEADER, TIMESTAMP_TOLERANCE


def compute_signature(timestamp: str, body: Union[bytes, str], secret: str, encoding: str = "utf-8") -> str:
    """
    Compute the signature Frame.io sends for a callback.

    Args:
        timestamp: Request timestamp header value
        body: Raw request body
        secret: Shared signing secret
        encoding: Encoding of the raw body

    Returns:
        Signature in ``v0=<hex>`` form
    """
    if isinstance(body, bytes):
        body = body.decode(encoding)
    string_to_sign = f"{SIGNATURE_VERSION}:{timestamp}:{body}"
    digest = hmac.new(secret.encode("utf-8"), string_to_sign.encode("utf-8"), hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def verify_timestamp(timestamp: Optional[str], now: Optional[float] = None) -> None:
    """
    Check that a callback timestamp is within the accepted window.

    Args:
        timestamp: Seconds since epoch as sent in the timestamp header
        now: Current time in seconds since epoch (default: time.time())

    Raises:
        AuthenticationError: If the timestamp is missing, malformed or out of bounds
    """
    if not timestamp:
        logging.warning("Missing timestamp")
        raise AuthenticationError("Missing timestamp")

    try:
        value = float(timestamp)
    except ValueError as e:
        logging.warning("Malformed timestamp: %r", timestamp)
        raise AuthenticationError("Malformed timestamp") from e
    if not math.isfinite(value):
        logging.warning("Malformed timestamp: %r", timestamp)
        raise AuthenticationError("Malformed timestamp")

    current = time.time() if now is None else now
    if value < current - TIMESTAMP_TOLERANCE or value > current + TIMESTAMP_TOLERANCE:
        logging.warning("Timestamp out of bounds. Timestamp: %s; now: %s", timestamp, current)
        raise AuthenticationError("Timestamp out of bounds")


def verify_timestamp_and_signature(
    timestamp: Optional[str],
    signature: Optional[str],
    body: Union[bytes, str],
    secret: str,
    encoding: str = "utf-8",
    now: Optional[float] = None,
) -> None:
    """
    Verify a callback's freshness and authenticity.

    Args:
        timestamp: Value of the X-Frameio-Request-Timestamp header
        signature: Value of the X-Frameio-Signature header
        body: Raw, undecoded request body
        secret: Shared signing secret
        encoding: Encoding of the raw body
        now: Current time in seconds since epoch (default: time.time())

    Raises:
        AuthenticationError: If either check fails
    """
    if not secret:
        logging.error("No signing secret configured, rejecting callback")
        raise AuthenticationError("No signing secret configured")

    verify_timestamp(timestamp, now)

    expected = compute_signature(timestamp, body, secret, encoding)  # type: ignore[arg-type]
    if not signature or not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        logging.warning("Mismatched HMAC. Expecting '%s', received '%s'", expected, signature)
        raise AuthenticationError("Signature mismatch")


def verify_request(
    headers: Mapping[str, str], body: Union[bytes, str], secret: str, encoding: str = "utf-8"
) -> None:
    """
    Verify a callback from its headers.

    Header names are matched case-insensitively.

    Raises:
        AuthenticationError: If verification fails
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    verify_timestamp_and_signature(
        lowered.get(TIMESTAMP_HEADER.lower()),
        lowered.get(SIGNATURE_HEADER.lower()),
        body,
        secret,
        encoding,
    )


__all__ = ["compute_signature", "verify_timestamp", "verify_timestamp_and_signature", "verify_request"]
