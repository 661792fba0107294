"""Svix-style webhook signatures.

The sender signs ``<timestamp>.<raw body>`` with HMAC-SHA256 using the
base64-decoded secret (``whsec_`` prefix removed) and sends the base64
digest as ``v1,<digest>``.
"""

import base64
import hashlib
import hmac
import logging
import time
from typing import Optional, Union

logger = logging.getLogger(__name__)

SECRET_PREFIX = "whsec_"
SIGNATURE_VERSION = "v1"
DEFAULT_TOLERANCE_SECONDS = 300


def decode_secret(secret: str) -> bytes:
    """Strip the ``whsec_`` prefix and base64-decode the signing key."""
    if secret.startswith(SECRET_PREFIX):
        secret = secret[len(SECRET_PREFIX):]
    return base64.b64decode(secret, validate=True)


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def compute_signature(timestamp: str, body: Union[str, bytes], secret: str) -> str:
    """Base64 HMAC-SHA256 over ``<timestamp>.<body>``.

    The body is used byte for byte as received.
    """
    signed_content = _to_bytes(timestamp) + b"." + _to_bytes(body)
    digest = hmac.new(decode_secret(secret), signed_content, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign_payload(timestamp: str, body: Union[str, bytes], secret: str) -> str:
    """Full signature header value, e.g. ``v1,K5oZfzN95Z9UVu1EsfQmfVNQhnkZ2pj9o9NDN/H/pI4=``."""
    return f"{SIGNATURE_VERSION},{compute_signature(timestamp, body, secret)}"


def verify_signature(
    body: Union[str, bytes],
    signature: str,
    secret: str,
    timestamp: str,
) -> bool:
    """Verify a webhook signature.

    Args:
        body: Raw request body
        signature: Signature with the ``v1,`` prefix already removed
        secret: Webhook secret (with or without ``whsec_`` prefix)
        timestamp: Value of the timestamp header

    Returns:
        True if the signature matches. Any error while decoding or hashing
        yields False.
    """
    try:
        expected = compute_signature(timestamp, body, secret)
        return hmac.compare_digest(expected.encode("ascii"), signature.encode("ascii"))
    except Exception as e:
        logger.error(f"Webhook signature verification error: {e}")
        return False


def extract_signatures(header: str) -> list[str]:
    """Split a signature header into bare signatures.

    Svix may send several space-separated entries (``v1,abc v1,def``)
    during secret rotation.
    """
    prefix = f"{SIGNATURE_VERSION},"
    signatures = []
    for entry in header.split():
        if entry.startswith(prefix):
            entry = entry[len(prefix):]
        if entry:
            signatures.append(entry)
    return signatures


def timestamp_age(timestamp: str, now: Optional[float] = None) -> int:
    """Absolute distance in seconds between ``timestamp`` and now.

    Raises:
        ValueError: if the timestamp is not a decimal integer
    """
    if now is None:
        now = time.time()
    return abs(int(now) - int(timestamp.strip()))

