"""
Pytest configuration and fixtures for FakePay SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from fakepay import AsyncFakePayClient, FakePayClient


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


class _HTTPXMock:
    """Queue of canned responses served through ``httpx.MockTransport``.

    Every request that reaches the transport is recorded, so tests can
    assert both on what was sent and on whether anything was sent at all.
    """

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[httpx.Request] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        response_headers = dict(headers or {})
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers.setdefault("content-type", "application/json")

        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def get_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        match = self._pop_match(request.method, str(request.url))
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


# Mock response data, shaped like the gateway's responses
MOCK_RESPONSES = {
    "payment": {
        "paymentId": "pay_abc",
        "merchantId": "mer_demo123",
        "orderId": "order_001",
        "amount": 50000,
        "status": "CREATED",
        "paymentUrl": "http://localhost:4000/pay/pay_abc",
        "qrData": "upi://pay?pa=mer_demo123@fakepay&am=500.00",
    },
    "payment_list": {
        "payments": [
            {"paymentId": "pay_abc", "amount": 50000, "status": "COMPLETED"},
            {"paymentId": "pay_def", "amount": 1200, "status": "PENDING"},
        ],
        "pagination": {"total": 2, "limit": 50, "offset": 0},
    },
    "refund": {
        "success": True,
        "refundId": "ref_001",
        "paymentId": "pay_abc",
        "amount": 50000,
        "status": "REFUNDED",
    },
    "vpa": {"success": True, "vpa": {"vpa": "usr1@fakepay", "userId": "usr_1", "isActive": True}},
    "upi_txn": {"txnId": "txn_001", "paymentId": "pay_abc", "status": "PENDING"},
    "upi_confirm": {"success": True, "txnId": "txn_001", "status": "SUCCESS", "upiRef": "412345678901"},
    "qr": {
        "upiIntent": "upi://pay?pa=mer_demo123@fakepay&am=500.00&tr=pay_abc",
        "payeeVpa": "mer_demo123@fakepay",
        "amount": 50000,
    },
    "wallet": {"userId": "usr_1", "balance": 100000, "currency": "INR"},
}


@pytest.fixture
def key_id() -> str:
    """Test API key ID."""
    return "test_key_id"


@pytest.fixture
def key_secret() -> str:
    """Test API key secret."""
    return "test_key_secret"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return "https://gateway.fakepay.test"


@pytest.fixture
def api_url(base_url: str) -> str:
    return f"{base_url}/api/v1"


@pytest.fixture
def httpx_mock() -> _HTTPXMock:
    return _HTTPXMock()


@pytest.fixture
async def client(key_id: str, key_secret: str, base_url: str, httpx_mock: _HTTPXMock):
    """Async client wired to the mock transport."""
    client = AsyncFakePayClient(
        key_id=key_id,
        key_secret=key_secret,
        base_url=base_url,
        transport=httpx_mock.transport,
    )
    yield client
    await client.close()


@pytest.fixture
def sync_client(key_id: str, key_secret: str, base_url: str, httpx_mock: _HTTPXMock):
    """Sync client wired to the mock transport."""
    client = FakePayClient(
        key_id=key_id,
        key_secret=key_secret,
        base_url=base_url,
        transport=httpx_mock.transport,
    )
    yield client
    client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES
