"""FakePay SDK Models."""
from .errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorCode,
    FakePayError,
    NotFoundError,
    RateLimitError,
    SignatureVerificationError,
    ValidationError,
)
from .base import FakePayModel
from .payment import CreatePaymentRequest, ListPaymentsParams, PaymentStatus, RefundPaymentRequest
from .upi import ConfirmUpiRequest, CreateVpaRequest, HistoryParams, InitiateUpiRequest
from .wallet import TopupRequest, TransferRequest
from .webhook import WebhookEvent, WebhookEventType

__all__ = [
    "FakePayModel",
    "CreatePaymentRequest",
    "ListPaymentsParams",
    "PaymentStatus",
    "RefundPaymentRequest",
    "ConfirmUpiRequest",
    "CreateVpaRequest",
    "HistoryParams",
    "InitiateUpiRequest",
    "TopupRequest",
    "TransferRequest",
    "WebhookEvent",
    "WebhookEventType",
    "ErrorCode",
    "FakePayError",
    "ConfigurationError",
    "ValidationError",
    "SignatureVerificationError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
]
