"""Records shared by Extend API requests and responses.

Field names follow https://developer.paywithextend.com/ schemas.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from .base import ExtendModel


class IssuerSanctions(ExtendModel):
    name: Optional[str] = None
    status: Optional[str] = None


class User(ExtendModel):
    """An Extend user (cardholder, recipient or the signed in account)."""

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    phone_iso_country: Optional[str] = None
    avatar_type: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    currency: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    verified: Optional[bool] = None
    has_expensify_link: Optional[bool] = None
    quickbooks_token_id: Optional[str] = None
    employee_id: Optional[str] = None
    issuer_sanctions: Optional[list[IssuerSanctions]] = None
    organization_id: Optional[str] = None
    organization_role: Optional[str] = None


class Pagination(ExtendModel):
    page: Optional[int] = None
    page_item_count: Optional[int] = None
    total_items: Optional[int] = None
    number_of_pages: Optional[int] = None


class CardImage(ExtendModel):
    id: Optional[str] = None
    content_type: Optional[str] = None
    urls: Optional[dict[str, str]] = None
    text_color_rgba: Optional[str] = Field(default=None, alias="textColorRGBA")
    has_text_shadow: Optional[bool] = None
    shadow_text_color_rgba: Optional[str] = Field(
        default=None, alias="shadowTextColorRGBA"
    )


class Recurrence(ExtendModel):
    """Recurring balance refresh settings of a virtual card."""

    id: Optional[str] = None
    balance_cents: Optional[int] = None
    period: Optional[str] = None
    interval: Optional[int] = None
    terminator: Optional[str] = None
    count: Optional[int] = None
    until: Optional[str] = None
    by_week_day: Optional[int] = None
    by_month_day: Optional[int] = None
    by_year_day: Optional[int] = None
    prev_recurrence_at: Optional[str] = None
    next_recurrence_at: Optional[str] = None
    current_count: Optional[int] = None
    remaining_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class VirtualCardRevision(ExtendModel):
    """Pending changes to a virtual card awaiting approval."""

    balance_cents: Optional[int] = None
    valid_from: Optional[str] = None
    valid_to: Optional[str] = None
    recurs: Optional[bool] = None
    active_until: Optional[str] = None
    currency: Optional[str] = None
    recurrence: Optional[Recurrence] = None
    receipt_attachments: Optional[dict[str, Any]] = None


class Address(ExtendModel):
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal: Optional[str] = None
    country: Optional[str] = None


class VirtualCardFeature(ExtendModel):
    recurrence: Optional[bool] = None
    custom_address: Optional[bool] = None
    custom_min: Optional[bool] = None
    custom_max: Optional[bool] = None
    wallets_enabled: Optional[str] = None
    mcc_control: Optional[bool] = None
    qbo_report_enabled: Optional[bool] = None


class MccRange(ExtendModel):
    """Inclusive range of merchant category codes."""

    lowest: Optional[str] = None
    highest: Optional[str] = None


class ReferenceField(ExtendModel):
    field_label: Optional[str] = None
    field_code: Optional[str] = None
    option_label: Optional[str] = None
    option_code: Optional[str] = None


class DeclineReason(ExtendModel):
    code: Optional[str] = None
    description: Optional[str] = None


class VirtualCard(ExtendModel):
    """A virtual card issued against a credit card."""

    id: Optional[str] = None
    status: Optional[str] = None
    recipient_id: Optional[str] = None
    recipient: Optional[User] = None
    cardholder_id: Optional[str] = None
    cardholder: Optional[User] = None
    card_image: Optional[CardImage] = None
    display_name: Optional[str] = None
    expires: Optional[str] = None
    currency: Optional[str] = None
    limit_cents: Optional[int] = None
    balance_cents: Optional[int] = None
    spent_cents: Optional[int] = None
    lifetime_spent_cents: Optional[int] = None
    awaiting_budget: Optional[bool] = None
    last4: Optional[str] = None
    number_format: Optional[str] = None
    valid_from: Optional[str] = None
    valid_to: Optional[str] = None
    inactive_since: Optional[str] = None
    timezone: Optional[str] = None
    credit_card_id: Optional[str] = None
    recurs: Optional[bool] = None
    recurrence: Optional[Recurrence] = None
    pending: Optional[VirtualCardRevision] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    address: Optional[Address] = None
    direct: Optional[bool] = None
    features: Optional[VirtualCardFeature] = None
    active_until: Optional[str] = None
    min_transaction_cents: Optional[int] = None
    max_transaction_cents: Optional[int] = None
    max_transaction_count: Optional[int] = None
    token_reference_ids: Optional[str] = None
    network: Optional[str] = None
    company_name: Optional[str] = None
    credit_card_display_name: Optional[str] = None
    issuer: Optional[str] = None
    valid_mcc_ranges: Optional[list[MccRange]] = None


class Transaction(ExtendModel):
    """A transaction list item of a virtual card."""

    id: Optional[str] = None
    cardholder_id: Optional[str] = None
    cardholder_name: Optional[str] = None
    cardholder_email: Optional[str] = None
    recipient_name: Optional[str] = None
    recipient_email: Optional[str] = None
    recipient_id: Optional[str] = None
    name_on_card: Optional[str] = None
    source: Optional[str] = None
    vcn_last4: Optional[str] = None
    vcn_display_name: Optional[str] = None
    virtual_card_id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    decline_reasons: Optional[list[DeclineReason]] = None
    approval_code: Optional[str] = None
    auth_billing_amount_cents: Optional[int] = None
    auth_billing_currency: Optional[str] = None
    auth_merchant_amount_cents: Optional[int] = None
    auth_merchant_currency: Optional[str] = None
    auth_exchange_rate: Optional[float] = None
    clearing_billing_amount_cents: Optional[int] = None
    clearing_billing_currency: Optional[str] = None
    clearing_merchant_amount_cents: Optional[int] = None
    clearing_merchant_currency: Optional[str] = None
    clearing_exchange_rate: Optional[float] = None
    mcc: Optional[str] = None
    mcc_group: Optional[str] = None
    mcc_description: Optional[str] = None
    merchant_id: Optional[str] = None
    merchant_name: Optional[str] = None
    merchant_address: Optional[str] = None
    merchant_city: Optional[str] = None
    merchant_state: Optional[str] = None
    merchant_country: Optional[str] = None
    merchant_zip: Optional[str] = None
    authed_at: Optional[str] = None
    cleared_at: Optional[str] = None
    updated_at: Optional[str] = None
    has_attachments: Optional[bool] = None
    reference_id: Optional[str] = None
    credit_card_id: Optional[str] = None
    sent_to_expensify: Optional[bool] = None
    sent_to_quickbooks: Optional[bool] = None
    attachments_count: Optional[int] = None
    reference_fields: Optional[list[ReferenceField]] = None
    credit_card_display_name: Optional[str] = None
