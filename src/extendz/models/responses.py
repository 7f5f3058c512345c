"""Response payloads returned by the Extend API."""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import ExtendModel
from .data import Pagination, Transaction, User, VirtualCard


class Response(ExtendModel):
    """Simple acknowledgement, e.g. from ``POST /forgot``."""

    msg: Optional[str] = None


class LoginSignUpResponse(ExtendModel):
    user: Optional[User] = None
    token: Optional[str] = None
    refresh_token: Optional[str] = None


class VirtualCardsResponse(ExtendModel):
    pagination: Optional[Pagination] = None
    virtual_cards: Optional[list[VirtualCard]] = Field(default_factory=list)


class VirtualCardResponse(ExtendModel):
    virtual_card: Optional[VirtualCard] = None


class TransactionsResponse(ExtendModel):
    transactions: Optional[list[Transaction]] = Field(default_factory=list)
