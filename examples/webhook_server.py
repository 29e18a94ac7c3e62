#!/usr/bin/env python3
"""
Webhook Server Example
======================

A FastAPI receiver that verifies the ``X-FakePay-Signature`` header
against the raw request body before trusting the event.

Prerequisites:
    pip install "fakepay[examples]"

Run:
    uvicorn examples.webhook_server:app --port 3000
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fakepay import (
    EVENT_HEADER,
    SIGNATURE_HEADER,
    APIError,
    AsyncFakePayClient,
    SignatureVerificationError,
    ValidationError,
    WebhookEventType,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("webhook_server")

fakepay = AsyncFakePayClient(
    key_id="test_key_id",
    key_secret="test_key_secret",
    base_url="http://localhost:4000",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await fakepay.close()


app = FastAPI(title="FakePay webhook receiver", lifespan=lifespan)


@app.post("/webhook")
async def receive_webhook(request: Request) -> JSONResponse:
    # Verify the bytes exactly as received; re-serializing breaks signatures
    body = await request.body()
    signature = request.headers.get(SIGNATURE_HEADER)
    logger.info("Webhook received: %s", request.headers.get(EVENT_HEADER))

    try:
        event = fakepay.webhooks.construct_event(body, signature)
    except SignatureVerificationError:
        logger.warning("Invalid signature, webhook rejected")
        return JSONResponse({"error": "Invalid signature"}, status_code=400)
    except ValidationError:
        return JSONResponse({"error": "Malformed event"}, status_code=400)

    data = event.data
    if event.event == WebhookEventType.PAYMENT_CREATED:
        logger.info("Payment created: %s", event.payment_id)
    elif event.event == WebhookEventType.PAYMENT_PENDING:
        logger.info("Payment pending: %s", event.payment_id)
    elif event.event == WebhookEventType.PAYMENT_COMPLETED:
        logger.info(
            "Payment completed: %s amount=%s order=%s",
            event.payment_id,
            data.get("amount"),
            data.get("orderId"),
        )
    elif event.event == WebhookEventType.PAYMENT_FAILED:
        logger.info("Payment failed: %s reason=%s", event.payment_id, data.get("error"))
    elif event.event == WebhookEventType.PAYMENT_REFUNDED:
        logger.info("Payment refunded: %s amount=%s", event.payment_id, data.get("refundAmount"))
    else:
        logger.info("Unknown event type: %s", event.event)

    # Acknowledge receipt so the gateway stops redelivering
    return JSONResponse({"success": True})


@app.post("/create-test-payment")
async def create_test_payment() -> JSONResponse:
    try:
        payment = await fakepay.payments.create(
            merchant_id="mer_demo123",
            amount=50000,
            order_id=f"order_{int(time.time() * 1000)}",
            callback_url="http://localhost:3000/webhook",
            metadata={"test": True},
        )
    except APIError as e:
        return JSONResponse({"error": e.message}, status_code=500)

    return JSONResponse(
        {"success": True, "payment": {"id": payment["paymentId"], "url": payment.get("paymentUrl")}}
    )


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "service": "webhook-server"}
