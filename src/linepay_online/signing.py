"""Request signing for the LINE Pay V4 API.

Every request carries ``X-LINE-Authorization``, computed as::

    Base64(HMAC-SHA256(channelSecret, channelSecret + path + query + body + nonce))

``query`` is the encoded query string without the leading ``?`` (GET only)
and ``body`` is the exact JSON text sent (POST only). The concatenation
order is fixed by LINE Pay.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import uuid
from typing import Mapping, Optional
from urllib.parse import urlencode


def _hmac_base64(secret: str, data: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), data.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def generate_nonce() -> str:
    """Return a fresh single-use nonce."""
    return str(uuid.uuid4())


def build_query_string(params: Optional[Mapping[str, str]] = None) -> str:
    """Encode query parameters, preserving insertion order.

    Returns an empty string (no ``?``) when there is nothing to encode.
    """
    if not params:
        return ""
    return urlencode(params)


def generate_signature(
    secret: str,
    path: str,
    body: str,
    nonce: str,
    query_string: str = "",
) -> str:
    """Compute the ``X-LINE-Authorization`` header value.

    Args:
        secret: Channel secret, also used as the HMAC key
        path: Request path, e.g. ``/v4/payments/request``
        body: Serialized JSON body, or ``""`` for GET
        nonce: Per-request nonce
        query_string: Encoded query string without ``?``

    Returns:
        Base64-encoded HMAC-SHA256 signature
    """
    return _hmac_base64(secret, f"{secret}{path}{query_string}{body}{nonce}")


def verify_signature(secret: str, data: str, signature: str) -> bool:
    """Check a signature received from LINE Pay in constant time.

    Both values are padded to the same length before comparing, so a
    length mismatch costs as much as a content mismatch.
    """
    expected = _hmac_base64(secret, data).encode("ascii")
    received = signature.encode("utf-8")
    length = max(len(expected), len(received))
    same = hmac.compare_digest(expected.ljust(length, b"\0"), received.ljust(length, b"\0"))
    return same and len(expected) == len(received)
