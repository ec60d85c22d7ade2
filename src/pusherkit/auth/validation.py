"""Input checks applied before anything is signed or sent."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from pusherkit.common.errors import (
    EventNameTooLong,
    InvalidChannelName,
    InvalidSocketId,
    TooManyChannels,
    ValidationError,
)

MAX_CHANNEL_LENGTH = 200
MAX_EVENT_NAME_LENGTH = 200
MAX_TRIGGER_CHANNELS = 100

_CHANNEL_RE = re.compile(r"[A-Za-z0-9_\-=@,.;]+")
_SOCKET_ID_RE = re.compile(r"\d+\.\d+", re.ASCII)


def validate_channel(channel: Any) -> str:
    """Return ``channel`` if it is a valid channel name."""
    if not isinstance(channel, str) or not channel or not _CHANNEL_RE.fullmatch(channel):
        raise InvalidChannelName(f"Invalid channel name: {channel!r}", channel)
    if len(channel) > MAX_CHANNEL_LENGTH:
        raise InvalidChannelName(f"Channel name too long: {channel!r}", channel)
    return channel


def validate_socket_id(socket_id: Any) -> str:
    """Return ``socket_id`` if it has the ``<number>.<number>`` form."""
    if not isinstance(socket_id, str) or not _SOCKET_ID_RE.fullmatch(socket_id):
        raise InvalidSocketId(f"Invalid socket id: {socket_id!r}", socket_id)
    return socket_id


def validate_event_name(name: Any) -> str:
    """Return ``name`` if it is a string of at most 200 characters."""
    if not isinstance(name, str):
        raise ValidationError(f"Invalid event name: {name!r}", name)
    if len(name) > MAX_EVENT_NAME_LENGTH:
        raise EventNameTooLong(f"Too long event name: {name!r}", name)
    return name


def validate_channels(channels: Sequence[str]) -> list[str]:
    """Validate the channel list of a trigger call."""
    if len(channels) > MAX_TRIGGER_CHANNELS:
        raise TooManyChannels(
            f"Can't trigger a message to more than {MAX_TRIGGER_CHANNELS} channels",
            list(channels),
        )
    if not channels:
        raise TooManyChannels("At least one channel is required", list(channels))
    return [validate_channel(channel) for channel in channels]
