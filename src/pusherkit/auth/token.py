"""Application credential used to sign and verify messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from pusherkit.common.errors import ConfigurationError
from pusherkit.common.hmac import sign, verify


@dataclass(frozen=True)
class Credential:
    """An application key/secret pair."""

    key: str
    secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.key or not isinstance(self.key, str):
            raise ConfigurationError("Credential key must be a non-empty string")
        if not self.secret or not isinstance(self.secret, str):
            raise ConfigurationError("Credential secret must be a non-empty string")

    def sign(self, message: str | bytes) -> str:
        """Sign ``message`` with this credential's secret."""
        return sign(self.secret, message)

    def verify(self, message: str | bytes, signature: str | bytes | None) -> bool:
        """Check that ``signature`` was produced by this credential's secret."""
        return verify(self.secret, message, signature)
