"""
pusherkit: server-side toolkit for a publish/subscribe messaging service.

Signs REST requests, issues socket authentication tokens for private and
presence channels, and validates inbound WebHooks.
"""

from pusherkit.auth import Credential, SignableRequest, WebHook, authenticate
from pusherkit.client import Pusher
from pusherkit.common.errors import (
    EventNameTooLong,
    InvalidChannelName,
    InvalidSocketId,
    PusherError,
    RequestError,
    TooManyChannels,
    WebhookBodyError,
)
from pusherkit.common.settings import Settings, get_settings

__version__ = "1.0.0"

__all__ = [
    "Credential",
    "EventNameTooLong",
    "InvalidChannelName",
    "InvalidSocketId",
    "Pusher",
    "PusherError",
    "RequestError",
    "Settings",
    "SignableRequest",
    "TooManyChannels",
    "WebHook",
    "WebhookBodyError",
    "authenticate",
    "get_settings",
]
