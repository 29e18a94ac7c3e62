"""
Wallets resource for FakePay SDK.

Wallets are keyed by user ID and hold balances in paise.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.wallet import TopupRequest, TransferRequest
from .base import AsyncBaseResource, SyncBaseResource, path_segment, unwrap


class AsyncWalletsResource(AsyncBaseResource):
    """Async resource for wallet operations.

    Example:
        ```python
        await client.wallets.topup(user_id="usr_1", amount=100000)
        await client.wallets.transfer(from_user="usr_1", to_user="usr_2", amount=2500)
        wallet = await client.wallets.get_balance("usr_1")
        ```
    """

    async def get_balance(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a user's wallet, unwrapped from the ``wallet`` field."""
        response = await self._get(f"/wallets/{path_segment(user_id, 'user_id')}")
        return unwrap(response, "wallet")

    async def topup(self, user_id: str, amount: int) -> Dict[str, Any]:
        """Add funds to a wallet.

        Args:
            user_id: Wallet owner
            amount: Amount in paise, must be positive

        Returns:
            The updated wallet response
        """
        request = TopupRequest.build(user_id=user_id, amount=amount)
        return await self._post("/wallets/topup", request.to_dict())

    async def transfer(self, from_user: str, to_user: str, amount: int) -> Dict[str, Any]:
        """Transfer funds between two users' wallets.

        Args:
            from_user: Sender user ID
            to_user: Receiver user ID
            amount: Amount in paise, must be positive

        Returns:
            The transfer result
        """
        request = TransferRequest.build(from_user=from_user, to_user=to_user, amount=amount)
        return await self._post("/wallets/transfer", request.to_dict())


class WalletsResource(SyncBaseResource):
    """Sync resource for wallet operations."""

    def get_balance(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a user's wallet, unwrapped from the ``wallet`` field."""
        response = self._get(f"/wallets/{path_segment(user_id, 'user_id')}")
        return unwrap(response, "wallet")

    def topup(self, user_id: str, amount: int) -> Dict[str, Any]:
        """Add funds (paise) to a wallet."""
        request = TopupRequest.build(user_id=user_id, amount=amount)
        return self._post("/wallets/topup", request.to_dict())

    def transfer(self, from_user: str, to_user: str, amount: int) -> Dict[str, Any]:
        """Transfer funds (paise) between two users' wallets."""
        request = TransferRequest.build(from_user=from_user, to_user=to_user, amount=amount)
        return self._post("/wallets/transfer", request.to_dict())


__all__ = [
    "AsyncWalletsResource",
    "WalletsResource",
]
