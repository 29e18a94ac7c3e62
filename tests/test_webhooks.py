"""Tests for webhook signature generation and verification."""
import hmac
from unittest import mock

import pytest

from fakepay import FakePayClient, SignatureVerificationError, ValidationError, WebhookEventType
from fakepay.webhooks import Webhooks, canonical_payload, generate_signature, verify_signature

# Signatures below were computed independently with
# `printf '%s' "<body>" | openssl dgst -sha256 -hmac "<secret>"`.
COMPLETED_BODY = '{"event":"payment.completed"}'
COMPLETED_SIG = "494887e70fda3c646a70b1d91a1fe803a507ea2c9774260610561d21708c903e"
FAILED_BODY = '{"event":"payment.failed"}'
FAILED_SIG = "d7e773d8ad13cd5e0dd7c432d1d622cd2ef446aa7216c95ae7455668d2b8ef0c"

DELIVERY_BODY = (
    b'{"event":"payment.completed",'
    b'"data":{"paymentId":"pay_abc","amount":50000,"orderId":"order_001"},'
    b'"created_at":"2024-01-15T10:30:00.000Z"}'
)
DELIVERY_SIG = "7935e73028249d3a74052f29a3b640132f07b5b6b284d8e78138cca5cfe020e3"

UNICODE_SIG = "01a389ae8e631f29b11aa3f2a50d4ca7830338900d5f8c27f0872a9c7e9c1ca4"


class TestGenerateSignature:
    """Tests for generate_signature."""

    def test_matches_reference_digest(self):
        """Should produce the reference HMAC-SHA256 hex digest."""
        assert generate_signature(COMPLETED_BODY, "secret123") == COMPLETED_SIG
        assert generate_signature(FAILED_BODY, "secret123") == FAILED_SIG

    def test_is_deterministic(self):
        """Should return the same signature every time."""
        first = generate_signature(COMPLETED_BODY, "secret123")
        assert all(generate_signature(COMPLETED_BODY, "secret123") == first for _ in range(5))

    def test_differs_per_event(self):
        assert generate_signature(COMPLETED_BODY, "secret123") != generate_signature(
            FAILED_BODY, "secret123"
        )

    def test_lowercase_hex_of_sha256_length(self):
        signature = generate_signature(DELIVERY_BODY, "test_key_secret")
        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)

    def test_bytes_and_str_sign_identically(self):
        assert generate_signature(DELIVERY_BODY, "test_key_secret") == DELIVERY_SIG
        assert generate_signature(DELIVERY_BODY.decode(), "test_key_secret") == DELIVERY_SIG

    def test_bytes_secret(self):
        assert generate_signature(COMPLETED_BODY, b"secret123") == COMPLETED_SIG


class TestCanonicalPayload:
    """Tests for dict serialization before signing."""

    def test_dict_is_compact_and_keeps_key_order(self):
        """Should match the sender's compact JSON encoding byte for byte."""
        payload = {
            "event": "payment.completed",
            "data": {"paymentId": "pay_abc", "amount": 50000, "orderId": "order_001"},
            "created_at": "2024-01-15T10:30:00.000Z",
        }
        assert canonical_payload(payload) == DELIVERY_BODY
        assert generate_signature(payload, "test_key_secret") == DELIVERY_SIG

    def test_non_ascii_is_not_escaped(self):
        payload = {"event": "payment.completed", "data": {"paymentId": "pay_abc", "note": "₹500 paid"}}
        assert "₹".encode("utf-8") in canonical_payload(payload)
        assert generate_signature(payload, "test_key_secret") == UNICODE_SIG

    def test_string_used_verbatim(self):
        """Whitespace in a raw body is part of what was signed."""
        spaced = '{"event": "payment.completed"}'
        assert canonical_payload(spaced) == spaced.encode()
        assert generate_signature(spaced, "secret123") != COMPLETED_SIG

    def test_reordered_dict_does_not_verify(self):
        """Re-serialized objects only verify if key order is preserved."""
        payload = {
            "created_at": "2024-01-15T10:30:00.000Z",
            "event": "payment.completed",
            "data": {"paymentId": "pay_abc", "amount": 50000, "orderId": "order_001"},
        }
        assert verify_signature(payload, DELIVERY_SIG, "test_key_secret") is False

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"amount": 500.0}, b'{"amount":500}'),
            ({"rate": 1e-7}, b'{"rate":1e-7}'),
            ({"rate": 0.000001}, b'{"rate":0.000001}'),
            ({"fee": 1e21}, b'{"fee":1e+21}'),
            ({"fee": 1e16}, b'{"fee":10000000000000000}'),
            ({"big": 2.0**60}, b'{"big":1152921504606847000}'),
            ({"ratio": 0.1, "tax": -12.5}, b'{"ratio":0.1,"tax":-12.5}'),
            ({"zero": -0.0}, b'{"zero":0}'),
            ({"x": float("nan"), "y": float("inf"), "z": float("-inf")}, b'{"x":null,"y":null,"z":null}'),
        ],
    )
    def test_numbers_match_javascript_formatting(self, payload, expected):
        """Floats should print the way JSON.stringify prints them."""
        assert canonical_payload(payload) == expected

    def test_integral_float_signs_like_integer(self):
        assert generate_signature({"amount": 500.0}, "secret123") == generate_signature(
            '{"amount":500}', "secret123"
        )

    def test_nested_values(self):
        payload = {"data": {"items": [1, 2.5, True, None, "a"], "ok": False}}
        assert canonical_payload(payload) == b'{"data":{"items":[1,2.5,true,null,"a"],"ok":false}}'

    def test_circular_payload_does_not_verify(self):
        payload = {"event": "payment.completed"}
        payload["self"] = payload
        with pytest.raises(ValueError):
            canonical_payload(payload)
        assert verify_signature(payload, COMPLETED_SIG, "secret123") is False


class TestVerifySignature:
    """Tests for verify_signature."""

    def test_round_trip(self):
        for payload in (COMPLETED_BODY, DELIVERY_BODY, {"event": "payment.refunded", "data": {}}):
            signature = generate_signature(payload, "whsec")
            assert verify_signature(payload, signature, "whsec") is True

    def test_reference_signature(self):
        assert verify_signature(DELIVERY_BODY, DELIVERY_SIG, "test_key_secret") is True

    def test_single_byte_mutation_rejected(self):
        """Should reject any payload that differs by one byte."""
        for index in range(len(DELIVERY_BODY)):
            mutated = bytearray(DELIVERY_BODY)
            mutated[index] ^= 0x01
            assert verify_signature(bytes(mutated), DELIVERY_SIG, "test_key_secret") is False

    def test_wrong_secret_rejected(self):
        signature = generate_signature(COMPLETED_BODY, "secret123")
        assert verify_signature(COMPLETED_BODY, signature, "secret124") is False

    @pytest.mark.parametrize(
        "signature",
        ["", None, "not-hex!!", "00", COMPLETED_SIG[:-1], COMPLETED_SIG + "00", "é" * 64, 12345],
    )
    def test_malformed_signature_returns_false(self, signature):
        """Should fail closed without raising."""
        assert verify_signature(COMPLETED_BODY, signature, "secret123") is False

    def test_unserializable_payload_returns_false(self):
        assert verify_signature({"when": object()}, COMPLETED_SIG, "secret123") is False

    def test_uppercase_hex_accepted(self):
        assert verify_signature(COMPLETED_BODY, COMPLETED_SIG.upper(), "secret123") is True

    def test_surrounding_whitespace_accepted(self):
        assert verify_signature(COMPLETED_BODY, f" {COMPLETED_SIG}\n", "secret123") is True

    def test_uses_constant_time_comparison(self):
        """Should compare through hmac.compare_digest."""
        with mock.patch("fakepay.webhooks.hmac.compare_digest", wraps=hmac.compare_digest) as spy:
            assert verify_signature(COMPLETED_BODY, COMPLETED_SIG, "secret123") is True
            assert verify_signature(COMPLETED_BODY, "00", "secret123") is False
        assert spy.call_count == 2


class TestWebhooksHelper:
    """Tests for the client-bound Webhooks helper."""

    def test_client_exposes_helper_keyed_with_secret(self):
        client = FakePayClient(key_id="test_key_id", key_secret="secret123")
        assert client.webhooks.generate_signature(COMPLETED_BODY) == COMPLETED_SIG
        assert client.webhooks.verify(COMPLETED_BODY, COMPLETED_SIG) is True
        assert client.webhooks.verify(COMPLETED_BODY, FAILED_SIG) is False

    def test_repr_hides_secret(self):
        assert "secret123" not in repr(Webhooks("secret123"))

    def test_construct_event(self):
        webhooks = Webhooks("test_key_secret")
        event = webhooks.construct_event(DELIVERY_BODY, DELIVERY_SIG)

        assert event.event == WebhookEventType.PAYMENT_COMPLETED
        assert event.payment_id == "pay_abc"
        assert event.data["amount"] == 50000
        assert event.created_at == "2024-01-15T10:30:00.000Z"

    def test_construct_event_keeps_unknown_event_names(self):
        webhooks = Webhooks("whsec")
        body = '{"event":"payment.disputed","data":{},"created_at":1705314600}'
        event = webhooks.construct_event(body, webhooks.generate_signature(body))
        assert event.event == "payment.disputed"

    def test_construct_event_rejects_bad_signature(self):
        with pytest.raises(SignatureVerificationError):
            Webhooks("test_key_secret").construct_event(DELIVERY_BODY, FAILED_SIG)

    def test_construct_event_rejects_non_event_body(self):
        webhooks = Webhooks("whsec")
        body = '{"data":{}}'
        with pytest.raises(ValidationError):
            webhooks.construct_event(body, webhooks.generate_signature(body))
