"""Webhook models for FakePay SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field

from .base import FakePayModel


class WebhookEventType(str, Enum):
    """Webhook event names sent by the gateway."""

    PAYMENT_CREATED = "payment.created"
    PAYMENT_PENDING = "payment.pending"
    PAYMENT_COMPLETED = "payment.completed"
    PAYMENT_FAILED = "payment.failed"
    PAYMENT_REFUNDED = "payment.refunded"


class WebhookEvent(FakePayModel):
    """A webhook delivery body.

    ``event`` stays a plain string for names this SDK does not know yet.
    ``created_at`` is kept exactly as sent.
    """

    event: Union[WebhookEventType, str]
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[Union[str, int, float]] = None

    @property
    def payment_id(self) -> Optional[str]:
        return self.data.get("paymentId")
