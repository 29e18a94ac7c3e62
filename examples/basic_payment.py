#!/usr/bin/env python3
"""
Basic Payment Example
=====================

Creates a payment, fetches it back, lists the merchant's payments and
issues a partial refund.

Prerequisites:
    pip install fakepay
    A FakePay gateway running on http://localhost:4000

Run:
    python examples/basic_payment.py
"""

from __future__ import annotations

import asyncio
import time

from fakepay import APIError, AsyncFakePayClient


async def main() -> None:
    async with AsyncFakePayClient(
        key_id="test_key_id",
        key_secret="test_key_secret",
        base_url="http://localhost:4000",
    ) as client:
        try:
            print("Creating payment...")
            payment = await client.payments.create(
                merchant_id="mer_demo123",
                amount=50000,  # Rs 500 in paise
                order_id=f"order_{int(time.time() * 1000)}",
                callback_url="https://example.com/webhook",
                metadata={
                    "customer_name": "John Doe",
                    "customer_email": "john@example.com",
                    "items": [
                        {"name": "Product A", "price": 30000},
                        {"name": "Product B", "price": 20000},
                    ],
                },
            )
            print(f"  Payment ID:  {payment['paymentId']}")
            print(f"  Payment URL: {payment.get('paymentUrl')}")
            print(f"  Status:      {payment.get('status')}")
            print(f"  QR data:     {'yes' if payment.get('qrData') else 'no'}")

            print("\nFetching payment details...")
            fetched = await client.payments.fetch(payment["paymentId"])
            print(f"  Current status: {fetched['status']}")

            print("\nListing recent payments...")
            listing = await client.payments.list(merchant_id="mer_demo123", limit=5)
            for item in listing.get("payments", []):
                print(f"  {item['paymentId']}  {item['amount'] / 100:.2f} INR  {item['status']}")

            print("\nRefunding Rs 200...")
            refund = await client.payments.refund(
                payment["paymentId"], amount=20000, reason="Customer request"
            )
            print(f"  Refund: {refund}")

        except APIError as e:
            print(f"Error: {e.message}")
            print(f"Status Code: {e.status_code}")


if __name__ == "__main__":
    asyncio.run(main())
