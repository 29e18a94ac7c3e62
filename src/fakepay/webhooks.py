"""
Webhook signature utilities for FakePay SDK.

The gateway signs each webhook delivery with HMAC-SHA256 over the raw
request body, keyed with the merchant's ``key_secret``, and sends the
lowercase hex digest in the ``X-FakePay-Signature`` header.

Always verify against the literal body bytes you received. A parsed and
re-serialized dict only verifies if it reproduces the sender's encoding
byte for byte.

Example:
    ```python
    from fakepay.webhooks import SIGNATURE_HEADER, verify_signature

    body = await request.body()
    if not verify_signature(body, request.headers.get(SIGNATURE_HEADER), secret):
        return JSONResponse({"error": "Invalid signature"}, status_code=400)
    ```
"""
from __future__ import annotations

import hashlib
import hmac
import json
import logging
import math
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .models.errors import SignatureVerificationError, ValidationError
from .models.webhook import WebhookEvent

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-FakePay-Signature"
EVENT_HEADER = "X-FakePay-Event"

WebhookPayload = Union[str, bytes, Mapping[str, Any]]


def canonical_payload(payload: WebhookPayload) -> bytes:
    """Return the exact bytes the signature is computed over.

    Strings and bytes are used verbatim. Mappings are encoded the way the
    gateway's JavaScript sender encodes them: insertion key order, no
    whitespace, non-ASCII left unescaped, and numbers written in
    ``JSON.stringify`` form (``500.0`` as ``500``, ``1e-7`` not ``1e-07``,
    NaN and infinities as ``null``).

    Raises:
        TypeError: for values JSON cannot represent
        ValueError: for circular references
    """
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return _encode(payload, set()).encode("utf-8")


def _js_number(value: float) -> str:
    """Format a float as JavaScript's Number toString does."""
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"

    # repr() already gives the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = k + exponent
    sign = "-" if value < 0 else ""

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if n > 0 else '-'}{abs(n - 1)}"


def _encode_key(key: Any) -> str:
    if isinstance(key, str):
        text = key
    elif isinstance(key, float) and math.isnan(key):
        text = "NaN"
    elif isinstance(key, float) and math.isinf(key):
        text = "Infinity" if key > 0 else "-Infinity"
    elif key is None or isinstance(key, (int, float)):
        text = _encode(key, set())
    else:
        raise TypeError(f"keys must be str, int, float, bool or None, not {type(key).__name__}")
    return json.dumps(text, ensure_ascii=False)


def _encode(value: Any, seen: set[int]) -> str:
    if value is None or isinstance(value, (str, bool)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _js_number(value)
    if isinstance(value, (Mapping, list, tuple)):
        if id(value) in seen:
            raise ValueError("Circular reference detected")
        seen.add(id(value))
        if isinstance(value, Mapping):
            body = ",".join(
                f"{_encode_key(k)}:{_encode(v, seen)}" for k, v in value.items()
            )
            encoded = "{" + body + "}"
        else:
            encoded = "[" + ",".join(_encode(item, seen) for item in value) + "]"
        seen.discard(id(value))
        return encoded
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _secret_bytes(secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode("utf-8")


def generate_signature(payload: WebhookPayload, secret: Union[str, bytes]) -> str:
    """Compute the hex HMAC-SHA256 signature of a webhook payload."""
    return hmac.new(
        _secret_bytes(secret),
        canonical_payload(payload),
        hashlib.sha256,
    ).hexdigest()


def verify_signature(
    payload: WebhookPayload,
    signature: Optional[str],
    secret: Union[str, bytes],
) -> bool:
    """Check a webhook signature in constant time.

    Returns False for any malformed signature (missing, wrong length,
    non-hex) or unserializable payload. Never raises.

    The header value is stripped and lower-cased before comparison, so
    uppercase hex and surrounding whitespace are accepted. The gateway
    itself only ever sends the bare lowercase digest.
    """
    if not signature or not isinstance(signature, str):
        return False

    try:
        expected = generate_signature(payload, secret)
    except (TypeError, ValueError):
        logger.debug("Webhook payload could not be serialized for verification")
        return False

    try:
        provided = signature.strip().lower().encode("ascii")
    except UnicodeEncodeError:
        return False

    # compare_digest still runs on a length mismatch and returns False
    return hmac.compare_digest(provided, expected.encode("ascii"))


class Webhooks:
    """Webhook helper bound to a merchant secret.

    Available as ``client.webhooks`` on both clients, keyed with the
    client's ``key_secret``.
    """

    def __init__(self, secret: Union[str, bytes]) -> None:
        self._secret = secret

    def __repr__(self) -> str:
        return "Webhooks(secret=***)"

    def generate_signature(self, payload: WebhookPayload) -> str:
        """Sign a payload, e.g. to build test deliveries."""
        return generate_signature(payload, self._secret)

    def verify(self, payload: WebhookPayload, signature: Optional[str]) -> bool:
        """Return True if ``signature`` matches ``payload``."""
        return verify_signature(payload, signature, self._secret)

    def construct_event(
        self,
        payload: WebhookPayload,
        signature: Optional[str],
    ) -> WebhookEvent:
        """Verify a delivery and parse it into a WebhookEvent.

        Raises:
            SignatureVerificationError: if the signature does not match
            ValidationError: if the verified body is not a webhook event
        """
        if not self.verify(payload, signature):
            logger.warning("Rejected webhook with invalid signature")
            raise SignatureVerificationError()

        try:
            if isinstance(payload, (str, bytes)):
                return WebhookEvent.model_validate_json(payload)
            return WebhookEvent.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(
                "Webhook body is not a valid event", field="payload"
            ) from exc
