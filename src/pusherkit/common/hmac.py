"""HMAC signing utilities shared by every pusherkit protocol."""

from __future__ import annotations

import hashlib
import hmac


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def sign(secret: str, message: str | bytes) -> str:
    """Create a lower-case hex HMAC-SHA256 signature."""
    return hmac.new(_to_bytes(secret), _to_bytes(message), hashlib.sha256).hexdigest()


def secure_compare(a: str | bytes, b: str | bytes) -> bool:
    """
    Compare two values in constant time.

    Both values are padded to the longer length so a length mismatch takes
    as long as a full comparison of the longer input.
    """
    a_bytes = _to_bytes(a)
    b_bytes = _to_bytes(b)
    width = max(len(a_bytes), len(b_bytes))
    same = hmac.compare_digest(a_bytes.ljust(width, b"\0"), b_bytes.ljust(width, b"\0"))
    return same & (len(a_bytes) == len(b_bytes))


def verify(secret: str, message: str | bytes, signature: str | bytes | None) -> bool:
    """Verify HMAC signature in constant time."""
    if not isinstance(signature, (str, bytes)):
        return False
    expected = sign(secret, message)
    return secure_compare(expected, signature)
