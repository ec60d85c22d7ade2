"""Authentication tokens for private and presence channel subscriptions."""

from __future__ import annotations

import json
from typing import Any

from pusherkit.auth.token import Credential
from pusherkit.auth.validation import validate_channel, validate_socket_id
from pusherkit.common.logging import get_logger

logger = get_logger(__name__)


def serialize_channel_data(channel_data: Any) -> str:
    """Serialize presence channel data as compact JSON."""
    return json.dumps(channel_data, separators=(",", ":"), ensure_ascii=False)


def string_to_sign(socket_id: str, channel: str, channel_data: str | None = None) -> str:
    parts = [socket_id, channel]
    if channel_data is not None:
        parts.append(channel_data)
    return ":".join(parts)


def authenticate(
    credential: Credential,
    socket_id: str,
    channel: str,
    channel_data: Any = None,
) -> dict[str, str]:
    """
    Authorize a socket to subscribe to a channel.

    Args:
        credential: Credential whose secret signs the token
        socket_id: Connection id assigned by the realtime service
        channel: Channel the socket wants to subscribe to
        channel_data: Optional presence data (any JSON-serializable value)

    Returns:
        ``{"auth": "<key>:<signature>"}`` plus ``channel_data`` when given

    Raises:
        InvalidSocketId: If socket_id is malformed
        InvalidChannelName: If channel is malformed
    """
    validate_socket_id(socket_id)
    validate_channel(channel)

    serialized = serialize_channel_data(channel_data) if channel_data is not None else None
    signature = credential.sign(string_to_sign(socket_id, channel, serialized))

    result = {"auth": f"{credential.key}:{signature}"}
    if serialized is not None:
        result["channel_data"] = serialized

    logger.debug(
        "Authenticated socket",
        socket_id=socket_id,
        channel=channel,
        presence=serialized is not None,
    )
    return result
