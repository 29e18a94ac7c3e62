#!/usr/bin/env python3
"""
UPI Payment Example
===================

Walks the complete UPI flow:
  1. Register a VPA for a user
  2. Top up the user's wallet
  3. Create a payment
  4. Generate the UPI QR / intent
  5. Initiate the UPI payment
  6. Confirm it with the PIN
  7. Verify the payment status
  8. Check the remaining wallet balance

Run:
    python examples/upi_payment.py
"""

from __future__ import annotations

import time

from fakepay import APIError, FakePayClient


def main() -> None:
    stamp = int(time.time() * 1000)
    user_id = f"usr_demo_{stamp}"

    with FakePayClient(key_id="test_key_id", key_secret="test_key_secret") as client:
        try:
            print("Step 1: Creating UPI VPA...")
            vpa_result = client.upi.create_vpa(user_id=user_id, vpa=f"user{stamp}@fakepay")
            vpa = vpa_result["vpa"]["vpa"]
            print(f"  VPA created: {vpa}")

            print("\nStep 2: Topping up wallet...")
            client.wallets.topup(user_id=user_id, amount=100000)
            print("  Wallet topped up with Rs 1000")

            print("\nStep 3: Creating payment...")
            payment = client.payments.create(
                merchant_id="mer_demo123",
                amount=50000,
                order_id=f"order_{stamp}",
                callback_url="https://example.com/webhook",
            )
            print(f"  Payment created: {payment['paymentId']}")

            print("\nStep 4: Generating UPI QR code...")
            qr = client.upi.generate_qr(payment["paymentId"])
            print(f"  UPI Intent: {qr['upiIntent']}")
            print(f"  Payee VPA:  {qr['payeeVpa']}")
            print(f"  Amount:     {qr['amount'] / 100:.2f} INR")

            print("\nStep 5: Initiating UPI payment...")
            txn = client.upi.initiate(payment_id=payment["paymentId"], payer_vpa=vpa)
            print(f"  UPI Transaction ID: {txn['txnId']} ({txn['status']})")

            print("\nStep 6: Confirming payment...")
            result = client.upi.confirm(txn_id=txn["txnId"], pin="1234")
            print(f"  Status: {result['status']}")
            print(f"  UTR:    {result.get('upiRef')}")

            print("\nStep 7: Verifying payment...")
            final = client.payments.fetch(payment["paymentId"])
            print(f"  Final payment status: {final['status']}")

            print("\nStep 8: Checking wallet balance...")
            wallet = client.wallets.get_balance(user_id)
            print(f"  Remaining balance: {wallet['balance'] / 100:.2f} INR")

            history = client.upi.get_history(user_id, limit=10)
            print(f"\n{len(history.get('transactions', []))} UPI transaction(s) on record")

        except APIError as e:
            print(f"Error: {e.message}")
            print(f"Status Code: {e.status_code}")


if __name__ == "__main__":
    main()
