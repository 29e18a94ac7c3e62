"""UPI models for FakePay SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import FakePayModel


class CreateVpaRequest(FakePayModel):
    """Register a virtual payment address (e.g. ``user@fakepay``) for a user."""

    user_id: str = Field(alias="userId", min_length=1)
    vpa: str = Field(min_length=1)


class InitiateUpiRequest(FakePayModel):
    """Start a UPI collect against an existing payment."""

    payment_id: str = Field(alias="paymentId", min_length=1)
    payer_vpa: str = Field(alias="payerVpa", min_length=1)


class ConfirmUpiRequest(FakePayModel):
    """Confirm a pending UPI transaction with the payer's PIN."""

    txn_id: str = Field(alias="txnId", min_length=1)
    pin: str = Field(min_length=1, repr=False)


class HistoryParams(FakePayModel):
    """Pagination for UPI transaction history."""

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
