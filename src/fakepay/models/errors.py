"""Error models for FakePay SDK."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    import httpx

DEFAULT_API_ERROR_MESSAGE = "API Error"


class ErrorCode(str, Enum):
    """Machine-readable error kinds."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SIGNATURE_VERIFICATION_FAILED = "SIGNATURE_VERIFICATION_FAILED"
    API_ERROR = "API_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    INVALID_RESPONSE = "INVALID_RESPONSE"


class FakePayError(Exception):
    """Base exception for FakePay SDK."""

    default_code = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code.value
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(FakePayError, ValueError):
    """Client was constructed with missing or invalid settings."""

    default_code = ErrorCode.CONFIGURATION_ERROR


class ValidationError(FakePayError):
    """Input rejected locally, before any request is sent."""

    default_code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field})
        self.field = field


class SignatureVerificationError(FakePayError):
    """Webhook payload did not match its signature."""

    default_code = ErrorCode.SIGNATURE_VERIFICATION_FAILED

    def __init__(self, message: str = "Webhook signature verification failed"):
        super().__init__(message)


class APIError(FakePayError):
    """The gateway answered with a non-success status.

    ``status_code`` and ``response_body`` are what the gateway returned,
    so callers can tell a remote rejection from a local validation error
    without parsing messages.
    """

    default_code = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Any = None,
        code: Optional[str] = None,
    ):
        super().__init__(
            message,
            code=code,
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.response_body = response_body

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["error"]["response"] = self.response_body
        return data

    @classmethod
    def from_response(cls, response: "httpx.Response") -> "APIError":
        """Normalize a failed HTTP response into an APIError."""
        try:
            body = response.json()
        except ValueError:
            body = {"detail": response.text}

        message = _extract_message(body)
        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError(message, response_body=body)
        if status_code == 404:
            return NotFoundError(message, response_body=body)
        if status_code == 429:
            return RateLimitError(
                message,
                retry_after=_parse_retry_after(response.headers.get("Retry-After")),
                response_body=body,
            )
        return cls(message, status_code=status_code, response_body=body)


class AuthenticationError(APIError):
    """Credentials were rejected by the gateway."""

    default_code = ErrorCode.AUTHENTICATION_ERROR

    def __init__(self, message: str = "Invalid key_id or key_secret", response_body: Any = None):
        super().__init__(message, status_code=401, response_body=response_body)


class NotFoundError(APIError):
    """Requested resource does not exist."""

    default_code = ErrorCode.NOT_FOUND

    def __init__(self, message: str = "Resource not found", response_body: Any = None):
        super().__init__(message, status_code=404, response_body=response_body)


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    default_code = ErrorCode.RATE_LIMIT_EXCEEDED

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        response_body: Any = None,
    ):
        super().__init__(message, status_code=429, response_body=response_body)
        self.retry_after = retry_after
        self.details["retry_after"] = retry_after


def _extract_message(body: Any) -> str:
    if not isinstance(body, dict):
        return DEFAULT_API_ERROR_MESSAGE
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return DEFAULT_API_ERROR_MESSAGE


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
