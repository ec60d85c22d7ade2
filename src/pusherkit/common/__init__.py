"""Common utilities for pusherkit."""

from pusherkit.common.errors import (
    ConfigurationError,
    EventNameTooLong,
    InvalidChannelName,
    InvalidSocketId,
    PusherError,
    RequestError,
    ReservedParameterError,
    TooManyChannels,
    ValidationError,
    WebhookBodyError,
)
from pusherkit.common.hmac import secure_compare, sign, verify

__all__ = [
    "ConfigurationError",
    "EventNameTooLong",
    "InvalidChannelName",
    "InvalidSocketId",
    "PusherError",
    "RequestError",
    "ReservedParameterError",
    "TooManyChannels",
    "ValidationError",
    "WebhookBodyError",
    "secure_compare",
    "sign",
    "verify",
]
