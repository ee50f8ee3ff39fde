"""Payments and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from molliecli.formatting import (
    Amount,
    ApplicationFee,
    Displayable,
    PaginationLinks,
    fallback_safe_amount,
    fallback_safe_app_fee,
    fallback_safe_date,
    fallback_safe_locale,
    fallback_safe_mode,
    fallback_safe_payment_method,
    fallback_safe_sequence,
)

_PAYMENT_COLS = (
    "RESOURCE",
    "ID",
    "MODE",
    "STATUS",
    "CANCELABLE",
    "AMOUNT",
    "METHOD",
    "DESCRIPTION",
    "SEQUENCE",
    "REMAINING",
    "REFUNDED",
    "CAPTURED",
    "SETTLEMENT",
    "APP_FEE",
    "CREATED_AT",
    "AUTHORIZED_AT",
    "EXPIRES",
    "PAID_AT",
    "FAILED_AT",
    "CANCELED_AT",
    "CUSTOMER_ID",
    "SETTLEMENT_ID",
    "MANDATE_ID",
    "SUBSCRIPTION_ID",
    "ORDER_ID",
    "REDIRECT",
    "WEBHOOK",
    "LOCALE",
    "COUNTRY",
)

_PAYMENT_COL_MAP = {
    "RESOURCE": "indicates the response contains a payment object",
    "ID": "the identifier uniquely referring to this payment",
    "MODE": "the mode used to create this payment",
    "STATUS": "the payment status",
    "CANCELABLE": "whether or not the payment can be canceled",
    "AMOUNT": "the amount of the payment",
    "METHOD": "the payment method used for this payment",
    "DESCRIPTION": "a short description of the payment",
    "SEQUENCE": "indicates which type of payment this is in a recurring sequence",
    "REMAINING": "the remaining amount that can be refunded",
    "REFUNDED": "the total amount that is already refunded",
    "CAPTURED": "the total amount that is already captured for this payment",
    "SETTLEMENT": "this optional field will contain the amount that will be settled to your account",
    "APP_FEE": "the application fee, if the payment was created with one",
    "CREATED_AT": "the payment\u2019s date and time of creation",
    "AUTHORIZED_AT": "the date and time the payment became authorized,",
    "EXPIRES": "the date and time the payment will expire",
    "PAID_AT": "the date and time the payment became paid",
    "FAILED_AT": "the date and time the payment failed",
    "CANCELED_AT": "the date and time the payment was canceled",
    "CUSTOMER_ID": "if a customer was specified upon payment creation",
    "SETTLEMENT_ID": "the identifier referring to the settlement this payment was settled with",
    "MANDATE_ID": "if the payment is a first or recurring payment",
    "SUBSCRIPTION_ID": "the ID of the subscription that triggered the payment",
    "ORDER_ID": "the ID of the subscription that triggered the payment",
    "REDIRECT": "the URL your customer will be redirected to after completing or canceling the payment process",
    "WEBHOOK": "the URL Mollie will call as soon an important status change takes place",
    "LOCALE": "the customer\u2019s locale",
    "COUNTRY": "this optional field contains your customer\u2019s ISO 3166-1 alpha-2 country code",
}


@dataclass
class Payment:
    """A payment and the details shown for it."""

    resource: str = ""
    id: str = ""
    mode: Any = ""
    status: str = ""
    is_cancellable: bool = False
    amount: Amount | None = None
    method: Any = ""
    description: str = ""
    sequence_type: Any = ""
    amount_remaining: Amount | None = None
    amount_refunded: Amount | None = None
    amount_captured: Amount | None = None
    settlement_amount: Amount | None = None
    application_fee: ApplicationFee | None = None
    created_at: datetime | None = None
    authorized_at: datetime | None = None
    expires_at: datetime | None = None
    paid_at: datetime | None = None
    failed_at: datetime | None = None
    canceled_at: datetime | None = None
    customer_id: str = ""
    settlement_id: str = ""
    mandate_id: str = ""
    subscription_id: str = ""
    order_id: str = ""
    redirect_url: str = ""
    webhook_url: str = ""
    locale: Any = ""
    country_code: str = ""
    metadata: Any = None


@dataclass
class PaymentList:
    """A page of payments."""

    count: int = 0
    payments: list[Payment] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_payment_row(payment: Payment) -> dict[str, Any]:
    """The display row for one payment."""
    return {
        "RESOURCE": payment.resource,
        "ID": payment.id,
        "MODE": fallback_safe_mode(payment.mode),
        "STATUS": payment.status,
        "CANCELABLE": payment.is_cancellable,
        "AMOUNT": fallback_safe_amount(payment.amount),
        "METHOD": fallback_safe_payment_method(payment.method),
        "DESCRIPTION": payment.description,
        "SEQUENCE": fallback_safe_sequence(payment.sequence_type),
        "REMAINING": fallback_safe_amount(payment.amount_remaining),
        "REFUNDED": fallback_safe_amount(payment.amount_refunded),
        "CAPTURED": fallback_safe_amount(payment.amount_captured),
        "SETTLEMENT": fallback_safe_amount(payment.settlement_amount),
        "APP_FEE": fallback_safe_app_fee(payment.application_fee),
        "CREATED_AT": fallback_safe_date(payment.created_at),
        "AUTHORIZED_AT": fallback_safe_date(payment.authorized_at),
        "EXPIRES": fallback_safe_date(payment.expires_at),
        "PAID_AT": fallback_safe_date(payment.paid_at),
        "FAILED_AT": fallback_safe_date(payment.failed_at),
        "CANCELED_AT": fallback_safe_date(payment.canceled_at),
        "CUSTOMER_ID": payment.customer_id,
        "SETTLEMENT_ID": payment.settlement_id,
        "MANDATE_ID": payment.mandate_id,
        "SUBSCRIPTION_ID": payment.subscription_id,
        "ORDER_ID": payment.order_id,
        "REDIRECT": payment.redirect_url,
        "WEBHOOK": payment.webhook_url,
        "LOCALE": fallback_safe_locale(payment.locale),
        "COUNTRY": payment.country_code,
    }


@dataclass
class MolliePayment(Displayable):
    """Displays a single payment."""

    payment: Payment

    def kv(self) -> list[dict[str, Any]]:
        return [build_payment_row(self.payment)]

    def cols(self) -> list[str]:
        return list(_PAYMENT_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_PAYMENT_COL_MAP)


@dataclass
class MollieListPayments(Displayable):
    """Displays a list of payments."""

    payment_list: PaymentList

    def kv(self) -> list[dict[str, Any]]:
        return [build_payment_row(p) for p in self.payment_list.payments]

    def cols(self) -> list[str]:
        return list(_PAYMENT_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_PAYMENT_COL_MAP)