"""Payment models for FakePay SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field

from .base import FakePayModel


class PaymentStatus(str, Enum):
    """Payment status as reported by the gateway."""

    CREATED = "CREATED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class CreatePaymentRequest(FakePayModel):
    """Request to create a payment. Amounts are in paise."""

    merchant_id: str = Field(alias="merchantId", min_length=1)
    amount: int = Field(gt=0, strict=True)
    order_id: str = Field(alias="orderId", min_length=1)
    callback_url: Optional[str] = Field(default=None, alias="callbackUrl")
    recipient_id: Optional[str] = Field(default=None, alias="recipientId")
    metadata: Optional[dict[str, Any]] = None


class RefundPaymentRequest(FakePayModel):
    """Request to refund a payment; omit amount for a full refund."""

    amount: Optional[int] = Field(default=None, gt=0, strict=True)
    reason: Optional[str] = None


class ListPaymentsParams(FakePayModel):
    """Query filters for listing payments."""

    merchant_id: Optional[str] = Field(default=None, alias="merchantId")
    status: Optional[Union[PaymentStatus, str]] = None
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
