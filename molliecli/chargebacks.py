"""Chargebacks and their tabular display."""

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

_CHARGEBACK_COLS = (
    "RESOURCE",
    "ID",
    "AMOUNT",
    "SETTLEMENT_AMOUNT",
    "CREATED_AT",
    "REVERSED_AT",
    "PAYMENT_ID",
)

_CHARGEBACK_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "AMOUNT": "the amount charged back by the consumer",
    "SETTLEMENT_AMOUNT": "the amount that will be deducted from your account",
    "CREATED_AT": "the date and time the chargeback was issued",
    "REVERSED_AT": "the date and time the chargeback was reversed if applicable",
    "PAYMENT_ID": "the unique identifier of the payment this chargeback was issued for",
}


@dataclass
class Chargeback:
    """A debit for a previously credited payment."""

    resource: str = ""
    id: str = ""
    amount: Amount | None = None
    settlement_amount: Amount | None = None
    created_at: datetime | None = None
    reversed_at: datetime | None = None
    payment_id: str = ""


@dataclass
class ChargebacksList:
    """A page of chargebacks."""

    count: int = 0
    chargebacks: list[Chargeback] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_chargeback_row(chargeback: Chargeback) -> dict[str, Any]:
    """The display row for one chargeback."""
    return {
        "RESOURCE": chargeback.resource,
        "ID": chargeback.id,
        "AMOUNT": fallback_safe_amount(chargeback.amount),
        "SETTLEMENT_AMOUNT": fallback_safe_amount(chargeback.settlement_amount),
        "CREATED_AT": fallback_safe_date(chargeback.created_at),
        "REVERSED_AT": fallback_safe_date(chargeback.reversed_at),
        "PAYMENT_ID": chargeback.payment_id,
    }


@dataclass
class MollieChargeback(Displayable):
    """Displays a single chargeback."""

    chargeback: Chargeback

    def kv(self) -> list[dict[str, Any]]:
        return [build_chargeback_row(self.chargeback)]

    def cols(self) -> list[str]:
        return list(_CHARGEBACK_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_CHARGEBACK_COL_MAP)


@dataclass
class MollieChargebackList(Displayable):
    """Displays a list of chargebacks."""

    chargebacks_list: ChargebacksList

    def kv(self) -> list[dict[str, Any]]:
        return [build_chargeback_row(c) for c in self.chargebacks_list.chargebacks]

    def cols(self) -> list[str]:
        return list(_CHARGEBACK_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_CHARGEBACK_COL_MAP)