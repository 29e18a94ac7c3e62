"""
FakePay Python SDK

Client for the FakePay payment gateway API.

Example usage:
    ```python
    from fakepay import AsyncFakePayClient

    async with AsyncFakePayClient(
        key_id="your-key-id",
        key_secret="your-key-secret",
    ) as client:
        # Create a payment of Rs 500 (amounts are in paise)
        payment = await client.payments.create(
            merchant_id="mer_demo123",
            amount=50000,
            order_id="order_001",
        )

        # Look it up again
        details = await client.payments.fetch(payment["paymentId"])

        # Verify an incoming webhook
        ok = client.webhooks.verify(raw_body, signature_header)
    ```
"""
from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar, Union

import httpx

from .config import DEFAULT_BASE_URL, Credentials, GatewayConfig
from .models.errors import APIError, ErrorCode
from .resources.payments import AsyncPaymentsResource, PaymentsResource
from .resources.upi import AsyncUPIResource, UPIResource
from .resources.wallets import AsyncWalletsResource, WalletsResource
from .webhooks import Webhooks

logger = logging.getLogger(__name__)

USER_AGENT = "fakepay-python/0.1.0"

C = TypeVar("C", bound="_BaseClient")


class _BaseClient:
    """Configuration and response handling shared by both clients."""

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._config = GatewayConfig(
            credentials=Credentials(key_id=key_id, key_secret=key_secret),
            base_url=base_url,
            timeout=timeout,
        )
        self._transport = transport
        self.webhooks = Webhooks(self._config.credentials.key_secret)

    @classmethod
    def from_env(cls: type[C], **kwargs: Any) -> C:
        """Create a client from FAKEPAY_* environment variables."""
        config = GatewayConfig.from_env()
        return cls(
            key_id=config.credentials.key_id,
            key_secret=config.credentials.key_secret,
            base_url=config.base_url,
            **kwargs,
        )

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def _base_url(self) -> str:
        return self._config.base_url

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key_id={self._config.credentials.key_id!r}, "
            f"base_url={self._config.base_url!r})"
        )

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "headers": {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            "auth": self._config.auth,
        }
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    def _url(self, path: str) -> str:
        return f"{self._config.api_url}/{path.lstrip('/')}"

    @staticmethod
    def _clean_params(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
        if not params:
            return None
        return {k: v for k, v in params.items() if v is not None} or None

    @staticmethod
    def _handle_response(method: str, response: httpx.Response) -> Any:
        """Decode a response, raising APIError for non-success statuses."""
        logger.debug("%s %s -> %s", method, response.request.url, response.status_code)

        if not response.is_success:
            error = APIError.from_response(response)
            logger.warning(
                "FakePay API error %s on %s %s: %s",
                response.status_code,
                method,
                response.request.url.path,
                error.message,
            )
            raise error

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise APIError(
                "Invalid JSON in response",
                status_code=response.status_code,
                code=ErrorCode.INVALID_RESPONSE.value,
            ) from exc


class AsyncFakePayClient(_BaseClient):
    """
    Async FakePay API client.

    Provides access to all FakePay API resources:
    - payments: Create, fetch, list and refund payments
    - upi: VPAs, UPI collect/confirm, QR intents and history
    - wallets: Balances, top-ups and transfers
    - webhooks: Local signature generation and verification

    Args:
        key_id: API key ID (HTTP Basic username)
        key_secret: API key secret (HTTP Basic password and webhook secret)
        base_url: Gateway URL (default: http://localhost:4000)
        timeout: Request timeout; httpx's default when omitted
        transport: Optional httpx transport, e.g. for testing

    Raises:
        ConfigurationError: if key_id or key_secret is missing
    """

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(key_id, key_secret, base_url, timeout, transport)
        self._client: Optional[httpx.AsyncClient] = None

        self.payments = AsyncPaymentsResource(self)
        self.upi = AsyncUPIResource(self)
        self.wallets = AsyncWalletsResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(**self._client_kwargs())
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request. Transport errors propagate unchanged."""
        client = await self._get_client()
        response = await client.request(
            method,
            self._url(path),
            params=self._clean_params(params),
            json=json,
        )
        return self._handle_response(method, response)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncFakePayClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class FakePayClient(_BaseClient):
    """
    Synchronous FakePay API client.

    Same resources and arguments as AsyncFakePayClient, backed by
    ``httpx.Client``.

    Example:
        ```python
        with FakePayClient(key_id="...", key_secret="...") as client:
            wallet = client.wallets.get_balance("usr_123")
        ```
    """

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(key_id, key_secret, base_url, timeout, transport)
        self._client: Optional[httpx.Client] = None

        self.payments = PaymentsResource(self)
        self.upi = UPIResource(self)
        self.wallets = WalletsResource(self)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(**self._client_kwargs())
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request. Transport errors propagate unchanged."""
        client = self._get_client()
        response = client.request(
            method,
            self._url(path),
            params=self._clean_params(params),
            json=json,
        )
        return self._handle_response(method, response)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "FakePayClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
