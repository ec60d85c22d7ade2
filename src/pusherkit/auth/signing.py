"""Signed query strings for REST requests.

The signed message is ``METHOD\\nPATH\\nQUERY`` where QUERY is the
percent-encoded, byte-sorted query string including the injected auth
fields. The signature itself is appended last and is never signed.
"""

from __future__ import annotations

import hashlib
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from pusherkit.auth.token import Credential
from pusherkit.common.errors import ReservedParameterError
from pusherkit.common.logging import get_logger

logger = get_logger(__name__)

AUTH_VERSION = "1.0"
RESERVED_PARAMS = (
    "auth_key",
    "auth_timestamp",
    "auth_version",
    "auth_signature",
    "body_md5",
)
SIGNABLE_METHODS = ("GET", "POST")


@dataclass(frozen=True)
class SignableRequest:
    """A REST request before signing."""

    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    body: str | bytes | None = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in SIGNABLE_METHODS:
            raise ValueError(f"Unsupported method for signing: {self.method}")
        if not self.path.startswith("/"):
            raise ValueError(f"Request path must start with '/': {self.path!r}")
        object.__setattr__(self, "method", method)

        reserved = sorted(name for name in self.params if name in RESERVED_PARAMS)
        if reserved:
            raise ReservedParameterError(
                f"Reserved query parameters cannot be supplied: {', '.join(reserved)}",
                reserved,
            )


def body_md5(body: str | bytes) -> str:
    """Hex MD5 of a request body."""
    data = body.encode("utf-8") if isinstance(body, str) else body
    return hashlib.md5(data).hexdigest()


def build_query_string(params: Mapping[str, Any]) -> str:
    """
    Encode params as a query string sorted by key bytes.

    Keys and values are percent-encoded with spaces as ``%20``.
    """
    items = sorted(
        ((str(k), str(v)) for k, v in params.items()),
        key=lambda kv: kv[0].encode("utf-8"),
    )
    return "&".join(f"{quote(k, safe='')}={quote(v, safe='')}" for k, v in items)


def build_auth_params(
    credential: Credential,
    body: str | bytes | None,
    timestamp: int,
) -> dict[str, str]:
    """Auth fields injected into every signed request."""
    auth_params = {
        "auth_key": credential.key,
        "auth_timestamp": str(int(timestamp)),
        "auth_version": AUTH_VERSION,
    }
    if body is not None:
        auth_params["body_md5"] = body_md5(body)
    return auth_params


def canonical_message(method: str, path: str, query: str) -> str:
    """Build the exact string that is HMAC-signed."""
    return "\n".join([method.upper(), path, query])


def create_signed_query_string(
    credential: Credential,
    request: SignableRequest,
    timestamp: int | None = None,
) -> str:
    """
    Build the signed query string for a REST request.

    Args:
        credential: Credential whose secret signs the request
        request: Method, path, caller params and optional body
        timestamp: Seconds since epoch; the current time when omitted

    Returns:
        Query string ending with ``auth_signature``
    """
    if timestamp is None:
        timestamp = int(time.time())

    params: dict[str, Any] = dict(request.params)
    params.update(build_auth_params(credential, request.body, timestamp))

    query = build_query_string(params)
    signature = credential.sign(canonical_message(request.method, request.path, query))

    logger.debug(
        "Signed request",
        method=request.method,
        path=request.path,
        auth_key=credential.key,
        auth_timestamp=timestamp,
    )
    return f"{query}&auth_signature={signature}"
