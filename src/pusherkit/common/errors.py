"""Error types raised by pusherkit."""

from __future__ import annotations

from typing import Any


class PusherError(Exception):
    """Base class for all pusherkit errors."""


class ConfigurationError(PusherError, ValueError):
    """Client is missing or has malformed configuration."""


class ValidationError(PusherError, ValueError):
    """Input rejected before any signing takes place."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidChannelName(ValidationError):
    """Channel name is empty, too long, or has forbidden characters."""


class InvalidSocketId(ValidationError):
    """Socket id does not look like ``<number>.<number>``."""


class EventNameTooLong(ValidationError):
    """Event name exceeds the service limit."""


class TooManyChannels(ValidationError):
    """A trigger call addresses no channels or too many channels."""


class ReservedParameterError(ValidationError):
    """Caller supplied a query parameter that is computed during signing."""


class WebhookBodyError(PusherError):
    """WebHook data was requested but the body is not usable JSON."""

    def __init__(
        self,
        message: str,
        content_type: str | None,
        body: str | bytes | None,
        signature: str | None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.content_type = content_type
        self.body = body
        self.signature = signature


class RequestError(PusherError):
    """HTTP request to the service failed."""

    def __init__(
        self,
        message: str,
        url: str,
        status: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status = status
        self.body = body
