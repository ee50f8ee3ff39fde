"""Refunds and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from molliecli.formatting import (
    Amount,
    Displayable,
    PaginationLinks,
    fallback_safe_amount,
    fallback_safe_date,
)

_REFUND_COLS = (
    "RESOURCE",
    "ID",
    "AMOUNT",
    "SETTLEMENT_ID",
    "SETTLEMENT_AMOUNT",
    "DESCRIPTION",
    "METADATA",
    "STATUS",
    "PAYMENT_ID",
    "ORDER_ID",
    "CREATED_AT",
)

_REFUND_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "AMOUNT": "the amount refunded to your customer",
    "SETTLEMENT_ID": "the identifier referring to the settlement this payment was settled with",
    "SETTLEMENT_AMOUNT": "the amount that will be deducted from your account balance",
    "DESCRIPTION": "the description of the refund that may be shown to your customer,",
    "METADATA": "metadata you provided upon refund creation",
    "STATUS": "the refund carries a status field",
    "PAYMENT_ID": "the unique identifier of the payment this refund was created for",
    "ORDER_ID": "the unique identifier of the order this refund was created for",
    "CREATED_AT": "the date and time the refund was issued",
}


@dataclass
class Refund:
    """A refund credited to a customer."""

    resource: str = ""
    id: str = ""
    amount: Amount | None = None
    settlement_id: str = ""
    settlement_amount: Amount | None = None
    description: str = ""
    metadata: Any = None
    status: Any = ""
    payment_id: str = ""
    order_id: str = ""
    created_at: datetime | None = None


@dataclass
class RefundList:
    """A page of refunds."""

    count: int = 0
    refunds: list[Refund] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_refund_row(refund: Refund) -> dict[str, Any]:
    """The display row for one refund."""
    return {
        "RESOURCE": refund.resource,
        "ID": refund.id,
        "AMOUNT": fallback_safe_amount(refund.amount),
        "SETTLEMENT_ID": refund.settlement_id,
        "SETTLEMENT_AMOUNT": fallback_safe_amount(refund.settlement_amount),
        "DESCRIPTION": refund.description,
        "METADATA": refund.metadata,
        "STATUS": refund.status,
        "PAYMENT_ID": refund.payment_id,
        "ORDER_ID": refund.order_id,
        "CREATED_AT": fallback_safe_date(refund.created_at),
    }


@dataclass
class MollieRefund(Displayable):
    """Displays a single refund."""

    refund: Refund

    def kv(self) -> list[dict[str, Any]]:
        return [build_refund_row(self.refund)]

    def cols(self) -> list[str]:
        return list(_REFUND_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_REFUND_COL_MAP)


@dataclass
class MollieRefundList(Displayable):
    """Displays a list of refunds."""

    refund_list: RefundList

    def kv(self) -> list[dict[str, Any]]:
        return [build_refund_row(r) for r in self.refund_list.refunds]

    def cols(self) -> list[str]:
        return list(_REFUND_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_REFUND_COL_MAP)