"""Signing, socket authentication and WebHook validation."""

from pusherkit.auth.signing import (
    AUTH_VERSION,
    RESERVED_PARAMS,
    SignableRequest,
    build_query_string,
    canonical_message,
    create_signed_query_string,
)
from pusherkit.auth.socket import authenticate
from pusherkit.auth.token import Credential
from pusherkit.auth.validation import (
    validate_channel,
    validate_channels,
    validate_event_name,
    validate_socket_id,
)
from pusherkit.auth.webhook import WebHook

__all__ = [
    "AUTH_VERSION",
    "RESERVED_PARAMS",
    "Credential",
    "SignableRequest",
    "WebHook",
    "authenticate",
    "build_query_string",
    "canonical_message",
    "create_signed_query_string",
    "validate_channel",
    "validate_channels",
    "validate_event_name",
    "validate_socket_id",
]
