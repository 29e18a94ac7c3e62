"""Wallet models for FakePay SDK."""
from __future__ import annotations

from pydantic import Field

from .base import FakePayModel


class TopupRequest(FakePayModel):
    """Add funds (paise) to a user's wallet."""

    user_id: str = Field(alias="userId", min_length=1)
    amount: int = Field(gt=0, strict=True)


class TransferRequest(FakePayModel):
    """Move funds (paise) between two users' wallets."""

    from_user: str = Field(alias="from", min_length=1)
    to_user: str = Field(alias="to", min_length=1)
    amount: int = Field(gt=0, strict=True)
