"""
FakePay Python SDK

Client for the FakePay payment gateway: payments, UPI, wallets and
webhook signature verification.
"""

from .client import AsyncFakePayClient, FakePayClient
from .config import Credentials, GatewayConfig
from .models.errors import (
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
from .models.payment import PaymentStatus
from .models.webhook import WebhookEvent, WebhookEventType
from .webhooks import (
    EVENT_HEADER,
    SIGNATURE_HEADER,
    Webhooks,
    generate_signature,
    verify_signature,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "AsyncFakePayClient",
    "FakePayClient",
    "Credentials",
    "GatewayConfig",
    # Errors
    "FakePayError",
    "ErrorCode",
    "ConfigurationError",
    "ValidationError",
    "SignatureVerificationError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    # Models
    "PaymentStatus",
    "WebhookEvent",
    "WebhookEventType",
    # Webhooks
    "Webhooks",
    "generate_signature",
    "verify_signature",
    "SIGNATURE_HEADER",
    "EVENT_HEADER",
]
