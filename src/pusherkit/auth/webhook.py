"""Validation and access for inbound WebHook callbacks."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from pusherkit.auth.token import Credential
from pusherkit.common.errors import WebhookBodyError
from pusherkit.common.logging import get_logger

logger = get_logger(__name__)

KEY_HEADER = "x-pusher-key"
SIGNATURE_HEADER = "x-pusher-signature"
CONTENT_TYPE_HEADER = "content-type"
JSON_CONTENT_TYPE = "application/json"


class WebHook:
    """
    A WebHook request claiming to come from the service.

    Check ``is_valid()`` before trusting the data returned by the access
    methods: they only require the body to be JSON, not the signature to
    match.
    """

    def __init__(
        self,
        credential: Credential,
        headers: Mapping[str, str],
        raw_body: str | bytes,
    ) -> None:
        """
        Initialize the WebHook.

        Args:
            credential: Primary credential the signature is checked against
            headers: Request headers (matched case-insensitively)
            raw_body: Raw request body exactly as received
        """
        lowered = {name.lower(): value for name, value in headers.items()}
        self._credential = credential
        self._key = lowered.get(KEY_HEADER)
        self._signature = lowered.get(SIGNATURE_HEADER)
        self._content_type = lowered.get(CONTENT_TYPE_HEADER)
        self._body = raw_body
        # (body_valid, data), written once as a whole
        self._parsed: tuple[bool, Any] | None = None

    @property
    def key(self) -> str | None:
        return self._key

    @property
    def signature(self) -> str | None:
        return self._signature

    @property
    def content_type(self) -> str | None:
        return self._content_type

    @property
    def body(self) -> str | bytes:
        return self._body

    def _parse(self) -> tuple[bool, Any]:
        parsed = self._parsed
        if parsed is None:
            if not self.is_content_type_valid():
                parsed = (False, None)
            else:
                try:
                    parsed = (True, json.loads(self._body))
                except (ValueError, TypeError):
                    parsed = (False, None)
            self._parsed = parsed
        return parsed

    def is_content_type_valid(self) -> bool:
        """Only ``application/json`` is accepted, with no parameters."""
        return self._content_type == JSON_CONTENT_TYPE

    def is_body_valid(self) -> bool:
        """Check that the content type is valid and the body parsed as JSON."""
        return self._parse()[0]

    def is_valid(
        self,
        extra_credentials: Credential | Iterable[Credential] | None = None,
    ) -> bool:
        """
        Check the body and the signature.

        Args:
            extra_credentials: Additional credentials to accept, e.g. the
                previous key during a key rollover

        Returns:
            True if the body is JSON and the signature matches a credential
            whose key equals the WebHook's key
        """
        if not self.is_body_valid():
            return False

        if extra_credentials is None:
            extra: list[Credential] = []
        elif isinstance(extra_credentials, Credential):
            extra = [extra_credentials]
        else:
            extra = list(extra_credentials)

        for credential in [self._credential, *extra]:
            if self._key == credential.key and credential.verify(self._body, self._signature):
                return True

        logger.debug("WebHook signature did not match", key=self._key, candidates=1 + len(extra))
        return False

    def get_data(self) -> Any:
        """
        Get the parsed WebHook body.

        Raises:
            WebhookBodyError: If the body is not valid JSON
        """
        valid, data = self._parse()
        if not valid:
            raise self._body_error("Invalid WebHook body")
        return data

    def get_events(self) -> list[Any]:
        """Get the events list; empty when the body carries none."""
        events = self._get_object().get("events", [])
        if not isinstance(events, list):
            raise self._body_error("WebHook events must be a list")
        return events

    def get_time(self) -> datetime:
        """Get the WebHook timestamp as a UTC datetime."""
        time_ms = self._get_object().get("time_ms")
        if isinstance(time_ms, bool) or not isinstance(time_ms, (int, float)):
            raise self._body_error("WebHook body has no numeric time_ms")
        return datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)

    def _get_object(self) -> dict[str, Any]:
        data = self.get_data()
        if not isinstance(data, dict):
            raise self._body_error("WebHook body is not a JSON object")
        return data

    def _body_error(self, message: str) -> WebhookBodyError:
        return WebhookBodyError(message, self._content_type, self._body, self._signature)
