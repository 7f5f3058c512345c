"""Request payloads for the Extend API."""
from __future__ import annotations

from typing import Optional

from .base import ExtendModel
from .data import MccRange, Recurrence, ReferenceField


class LoginRequest(ExtendModel):
    email: str
    password: str


class LogoutRequest(ExtendModel):
    refresh_token: Optional[str] = None


class RefreshTokenLoginRequest(ExtendModel):
    refresh_token: str


class ForgotPasswordRequest(ExtendModel):
    email: str


class VirtualCardPageableRequest(ExtendModel):
    """Filters and paging for listing the signed in user's virtual cards."""

    count: Optional[int] = None
    page: Optional[int] = None
    sort_field: Optional[str] = None
    sort_direction: Optional[str] = None
    cardholder: Optional[str] = None
    recipient: Optional[str] = None
    cardholder_or_viewer: Optional[str] = None
    credit_card_id: Optional[str] = None
    status: Optional[str] = None
    statuses: Optional[list[str]] = None
    issued: Optional[bool] = None
    pending_request: Optional[bool] = None
    search: Optional[str] = None
    with_permission: Optional[str] = None


class CreateVirtualCardRequest(ExtendModel):
    credit_card_id: Optional[str] = None
    recipient: Optional[str] = None
    recipient_first_name: Optional[str] = None
    recipient_last_name: Optional[str] = None
    cardholder: Optional[str] = None
    display_name: Optional[str] = None
    reference_fields: Optional[list[ReferenceField]] = None
    notes: Optional[str] = None
    balance_cents: Optional[int] = None
    direct: Optional[bool] = None
    currency: Optional[str] = None
    valid_from: Optional[str] = None
    valid_to: Optional[str] = None
    recurs: Optional[bool] = None
    recurrence: Optional[Recurrence] = None
    receipt_attachment_ids: Optional[list[str]] = None
    valid_mcc_ranges: Optional[list[MccRange]] = None


class UpdateVirtualCardRequest(ExtendModel):
    credit_card_id: Optional[str] = None
    reference_fields: Optional[list[ReferenceField]] = None
    display_name: Optional[str] = None
    notes: Optional[str] = None
    balance_cents: Optional[int] = None
    currency: Optional[str] = None
    valid_from: Optional[str] = None
    valid_to: Optional[str] = None
    recurs: Optional[bool] = None
    recurrence: Optional[Recurrence] = None
    receipt_attachment_ids: Optional[list[str]] = None
    expiration_month_year: Optional[str] = None
    valid_mcc_ranges: Optional[list[MccRange]] = None
