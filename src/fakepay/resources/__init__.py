"""
Resources for the FakePay SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .payments import AsyncPaymentsResource, PaymentsResource
from .upi import AsyncUPIResource, UPIResource
from .wallets import AsyncWalletsResource, WalletsResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Payments
    "PaymentsResource",
    "AsyncPaymentsResource",
    # UPI
    "UPIResource",
    "AsyncUPIResource",
    # Wallets
    "WalletsResource",
    "AsyncWalletsResource",
]
