"""Client configuration for FakePay SDK."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Union

import httpx

from .models.errors import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:4000"
API_PREFIX = "/api/v1"

ENV_KEY_ID = "FAKEPAY_KEY_ID"
ENV_KEY_SECRET = "FAKEPAY_KEY_SECRET"
ENV_BASE_URL = "FAKEPAY_BASE_URL"


@dataclass(frozen=True)
class Credentials:
    """API key pair. The secret is kept out of repr."""

    key_id: str
    key_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.key_id or not self.key_secret:
            raise ConfigurationError("key_id and key_secret are required")


@dataclass(frozen=True)
class GatewayConfig:
    """Immutable transport settings shared by every request of a client."""

    credentials: Credentials
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[Union[float, httpx.Timeout]] = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def api_url(self) -> str:
        return f"{self.base_url}{API_PREFIX}"

    @property
    def auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.credentials.key_id, self.credentials.key_secret)

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Build a config from FAKEPAY_KEY_ID / FAKEPAY_KEY_SECRET / FAKEPAY_BASE_URL."""
        return cls(
            credentials=Credentials(
                key_id=os.getenv(ENV_KEY_ID, ""),
                key_secret=os.getenv(ENV_KEY_SECRET, ""),
            ),
            base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
        )
