"""
Payments resource for FakePay SDK.

This module provides both async and sync interfaces for payment operations.
All amounts are integers in paise.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.payment import CreatePaymentRequest, ListPaymentsParams, RefundPaymentRequest
from .base import AsyncBaseResource, SyncBaseResource, path_segment, unwrap


class AsyncPaymentsResource(AsyncBaseResource):
    """Async resource for payment operations.

    Example:
        ```python
        async with AsyncFakePayClient(key_id="...", key_secret="...") as client:
            payment = await client.payments.create(
                merchant_id="mer_demo123",
                amount=50000,
                order_id="order_001",
                callback_url="https://example.com/webhook",
            )
            refund = await client.payments.refund(payment["paymentId"], reason="duplicate")
        ```
    """

    async def create(
        self,
        merchant_id: str,
        amount: int,
        order_id: str,
        callback_url: Optional[str] = None,
        recipient_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Create a payment.

        Args:
            merchant_id: Merchant ID
            amount: Amount in paise, must be positive
            order_id: Merchant's order reference
            callback_url: URL the gateway sends webhooks to
            recipient_id: Optional recipient user ID
            metadata: Free-form metadata stored with the payment

        Returns:
            The created payment object

        Raises:
            ValidationError: if a required field is missing or amount is not positive
        """
        request = CreatePaymentRequest.build(
            merchant_id=merchant_id,
            amount=amount,
            order_id=order_id,
            callback_url=callback_url,
            recipient_id=recipient_id,
            metadata=metadata,
        )
        return await self._post("/payments", request.to_dict())

    async def fetch(self, payment_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a payment by ID.

        Returns:
            The payment object, unwrapped from the ``payment`` field
        """
        response = await self._get(f"/payments/{path_segment(payment_id, 'payment_id')}")
        return unwrap(response, "payment")

    async def list(
        self,
        merchant_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        """List payments.

        Args:
            merchant_id: Filter by merchant ID
            status: Filter by status (see PaymentStatus)
            limit: Number of records
            offset: Offset for pagination

        Returns:
            The full response, payments plus pagination metadata
        """
        params = ListPaymentsParams.build(
            merchant_id=merchant_id,
            status=status,
            limit=limit,
            offset=offset,
        )
        return await self._get("/payments", params=params.to_dict())

    async def refund(
        self,
        payment_id: str,
        amount: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Refund a payment.

        Args:
            payment_id: Payment ID
            amount: Refund amount in paise; full refund when omitted
            reason: Refund reason

        Returns:
            The refund result
        """
        path = f"/payments/{path_segment(payment_id, 'payment_id')}/refund"
        request = RefundPaymentRequest.build(amount=amount, reason=reason)
        return await self._post(path, request.to_dict())


class PaymentsResource(SyncBaseResource):
    """Sync resource for payment operations.

    Example:
        ```python
        with FakePayClient(key_id="...", key_secret="...") as client:
            payments = client.payments.list(merchant_id="mer_demo123", limit=10)
        ```
    """

    def create(
        self,
        merchant_id: str,
        amount: int,
        order_id: str,
        callback_url: Optional[str] = None,
        recipient_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Create a payment. See AsyncPaymentsResource.create."""
        request = CreatePaymentRequest.build(
            merchant_id=merchant_id,
            amount=amount,
            order_id=order_id,
            callback_url=callback_url,
            recipient_id=recipient_id,
            metadata=metadata,
        )
        return self._post("/payments", request.to_dict())

    def fetch(self, payment_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a payment by ID, unwrapped from the ``payment`` field."""
        response = self._get(f"/payments/{path_segment(payment_id, 'payment_id')}")
        return unwrap(response, "payment")

    def list(
        self,
        merchant_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        """List payments with optional filters."""
        params = ListPaymentsParams.build(
            merchant_id=merchant_id,
            status=status,
            limit=limit,
            offset=offset,
        )
        return self._get("/payments", params=params.to_dict())

    def refund(
        self,
        payment_id: str,
        amount: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Refund a payment, fully when amount is omitted."""
        path = f"/payments/{path_segment(payment_id, 'payment_id')}/refund"
        request = RefundPaymentRequest.build(amount=amount, reason=reason)
        return self._post(path, request.to_dict())


__all__ = [
    "AsyncPaymentsResource",
    "PaymentsResource",
]
