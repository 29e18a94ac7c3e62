"""
Base resource classes for FakePay SDK.

Resources only shape requests and unwrap responses; transport and error
normalization live on the client.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from urllib.parse import quote

from ..models.errors import ValidationError

if TYPE_CHECKING:
    from ..client import AsyncFakePayClient, FakePayClient


def path_segment(value: Optional[str], field: str) -> str:
    """URL-quote an identifier used in a request path.

    Raises:
        ValidationError: if the identifier is missing or empty
    """
    if value is None or not str(value):
        raise ValidationError(f"{field} is required", field=field)
    return quote(str(value), safe="")


def unwrap(response: Any, key: str) -> Any:
    """Return ``response[key]``, or None when the gateway omitted it."""
    if isinstance(response, dict):
        return response.get(key)
    return None


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncFakePayClient") -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request.

        Args:
            path: API endpoint path below /api/v1
            params: Query parameters; None values are dropped

        Returns:
            Decoded JSON body
        """
        return await self._client._request("GET", path, params=params)

    async def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: API endpoint path below /api/v1
            data: JSON request body

        Returns:
            Decoded JSON body
        """
        return await self._client._request("POST", path, json=data)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "FakePayClient") -> None:
        self._client = client

    def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request.

        Args:
            path: API endpoint path below /api/v1
            params: Query parameters; None values are dropped

        Returns:
            Decoded JSON body
        """
        return self._client._request("GET", path, params=params)

    def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: API endpoint path below /api/v1
            data: JSON request body

        Returns:
            Decoded JSON body
        """
        return self._client._request("POST", path, json=data)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "path_segment",
    "unwrap",
]
