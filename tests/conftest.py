"""Pytest configuration and fixtures."""

import hashlib
import hmac
import json
from typing import Any

import pytest

from pusherkit.auth.token import Credential
from pusherkit.client import Pusher
from pusherkit.common.settings import Settings

APP_KEY = "278d425bdf160c739803"
APP_SECRET = "7ad3773142a6692b25b8"


def hmac_hex(secret: str, message: str | bytes) -> str:
    """Reference HMAC-SHA256 computed independently of pusherkit."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


@pytest.fixture
def credential() -> Credential:
    """Primary credential."""
    return Credential(APP_KEY, APP_SECRET)


@pytest.fixture
def rotated_credential() -> Credential:
    """Second credential valid during a key rollover."""
    return Credential("a3b1c2d3e4f5a6b7c8d9", "f00dfeedcafebabe1234")


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_id="3",
        key=APP_KEY,
        secret=APP_SECRET,
        host="api.example.com",
        cluster=None,
        use_tls=False,
        port=None,
        encryption_master_key=None,
    )


@pytest.fixture
def client(settings: Settings) -> Pusher:
    """Client bound to the test settings."""
    return Pusher(settings)


@pytest.fixture
def webhook_body() -> bytes:
    """Sample WebHook body."""
    payload: dict[str, Any] = {
        "time_ms": 1327078148132,
        "events": [
            {"name": "channel_occupied", "channel": "test_channel"},
            {"name": "member_added", "channel": "presence-room", "user_id": "10"},
        ],
    }
    return json.dumps(payload).encode("utf-8")


def webhook_headers(
    credential: Credential,
    body: bytes,
    content_type: str = "application/json",
) -> dict[str, str]:
    """Headers of a WebHook signed by ``credential``."""
    return {
        "x-pusher-key": credential.key,
        "x-pusher-signature": hmac_hex(credential.secret, body),
        "content-type": content_type,
    }


@pytest.fixture
def reference_hmac():
    """Independent HMAC-SHA256 helper."""
    return hmac_hex


@pytest.fixture
def signed_headers():
    """Factory for WebHook headers signed by a credential."""
    return webhook_headers
