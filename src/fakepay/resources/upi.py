"""
UPI resource for FakePay SDK.

A UPI payment runs: register a VPA, initiate a collect against an existing
payment, then confirm it with the payer's PIN. The confirmation carries the
UTR (``upiRef``) used for settlement.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models.upi import ConfirmUpiRequest, CreateVpaRequest, HistoryParams, InitiateUpiRequest
from .base import AsyncBaseResource, SyncBaseResource, path_segment, unwrap


class AsyncUPIResource(AsyncBaseResource):
    """Async resource for UPI operations.

    Example:
        ```python
        vpa = await client.upi.create_vpa(user_id="usr_1", vpa="usr1@fakepay")
        txn = await client.upi.initiate(payment_id="pay_abc", payer_vpa="usr1@fakepay")
        result = await client.upi.confirm(txn_id=txn["txnId"], pin="1234")
        ```
    """

    async def create_vpa(self, user_id: str, vpa: str) -> Dict[str, Any]:
        """Register a VPA for a user.

        Returns:
            The created VPA object
        """
        request = CreateVpaRequest.build(user_id=user_id, vpa=vpa)
        return await self._post("/upi/vpa", request.to_dict())

    async def get_vpas(self, user_id: str) -> Optional[List[Dict[str, Any]]]:
        """List a user's VPAs, unwrapped from the ``vpas`` field."""
        response = await self._get(f"/upi/vpa/{path_segment(user_id, 'user_id')}")
        return unwrap(response, "vpas")

    async def initiate(self, payment_id: str, payer_vpa: str) -> Dict[str, Any]:
        """Initiate a UPI payment for an existing payment.

        Returns:
            The UPI transaction object
        """
        request = InitiateUpiRequest.build(payment_id=payment_id, payer_vpa=payer_vpa)
        return await self._post("/upi/initiate", request.to_dict())

    async def confirm(self, txn_id: str, pin: str) -> Dict[str, Any]:
        """Confirm a pending UPI transaction.

        Returns:
            The confirmation result, including the UTR
        """
        request = ConfirmUpiRequest.build(txn_id=txn_id, pin=pin)
        return await self._post("/upi/confirm", request.to_dict())

    async def get_transaction(self, txn_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a UPI transaction, unwrapped from the ``transaction`` field."""
        response = await self._get(f"/upi/transaction/{path_segment(txn_id, 'txn_id')}")
        return unwrap(response, "transaction")

    async def generate_qr(self, payment_id: str) -> Dict[str, Any]:
        """Get the QR payload and UPI intent for a payment."""
        return await self._get(f"/upi/qr/{path_segment(payment_id, 'payment_id')}")

    async def get_history(
        self,
        user_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Get a user's UPI transaction history."""
        path = f"/upi/history/{path_segment(user_id, 'user_id')}"
        params = HistoryParams.build(limit=limit, offset=offset)
        return await self._get(path, params=params.to_dict())


class UPIResource(SyncBaseResource):
    """Sync resource for UPI operations."""

    def create_vpa(self, user_id: str, vpa: str) -> Dict[str, Any]:
        """Register a VPA for a user."""
        request = CreateVpaRequest.build(user_id=user_id, vpa=vpa)
        return self._post("/upi/vpa", request.to_dict())

    def get_vpas(self, user_id: str) -> Optional[List[Dict[str, Any]]]:
        """List a user's VPAs, unwrapped from the ``vpas`` field."""
        response = self._get(f"/upi/vpa/{path_segment(user_id, 'user_id')}")
        return unwrap(response, "vpas")

    def initiate(self, payment_id: str, payer_vpa: str) -> Dict[str, Any]:
        """Initiate a UPI payment for an existing payment."""
        request = InitiateUpiRequest.build(payment_id=payment_id, payer_vpa=payer_vpa)
        return self._post("/upi/initiate", request.to_dict())

    def confirm(self, txn_id: str, pin: str) -> Dict[str, Any]:
        """Confirm a pending UPI transaction."""
        request = ConfirmUpiRequest.build(txn_id=txn_id, pin=pin)
        return self._post("/upi/confirm", request.to_dict())

    def get_transaction(self, txn_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a UPI transaction, unwrapped from the ``transaction`` field."""
        response = self._get(f"/upi/transaction/{path_segment(txn_id, 'txn_id')}")
        return unwrap(response, "transaction")

    def generate_qr(self, payment_id: str) -> Dict[str, Any]:
        """Get the QR payload and UPI intent for a payment."""
        return self._get(f"/upi/qr/{path_segment(payment_id, 'payment_id')}")

    def get_history(
        self,
        user_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Get a user's UPI transaction history."""
        path = f"/upi/history/{path_segment(user_id, 'user_id')}"
        params = HistoryParams.build(limit=limit, offset=offset)
        return self._get(path, params=params.to_dict())


__all__ = [
    "AsyncUPIResource",
    "UPIResource",
]
