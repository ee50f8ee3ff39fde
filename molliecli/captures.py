"""Captures and their tabular display."""

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
    fallback_safe_mode,
)

_CAPTURE_COLS = (
    "RESOURCE",
    "ID",
    "MODE",
    "AMOUNT",
    "SETTLEMENT_AMOUNT",
    "PAYMENT_ID",
    "SHIPMENT_ID",
    "SETTLEMENT_ID",
    "CREATED_AT",
)

_CAPTURE_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "MODE": "the mode used to create this capture",
    "AMOUNT": "the amount captured",
    "SETTLEMENT_AMOUNT": "the amount that will be settled to your account",
    "PAYMENT_ID": "the unique identifier of the payment",
    "SHIPMENT_ID": "the unique identifier of the shipment",
    "SETTLEMENT_ID": "the unique identifier of the settlement",
    "CREATED_AT": "the capture\u2019s date and time of creation",
}


@dataclass
class Capture:
    """A capture of an authorized payment."""

    resource: str = ""
    id: str = ""
    mode: Any = ""
    amount: Amount | None = None
    settlement_amount: Amount | None = None
    payment_id: str = ""
    shipment_id: str = ""
    settlement_id: str = ""
    created_at: datetime | None = None


@dataclass
class CapturesList:
    """A page of captures for one payment."""

    count: int = 0
    captures: list[Capture] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_capture_row(capture: Capture) -> dict[str, Any]:
    """The display row for one capture."""
    return {
        "RESOURCE": capture.resource,
        "ID": capture.id,
        "MODE": fallback_safe_mode(capture.mode),
        "AMOUNT": fallback_safe_amount(capture.amount),
        "SETTLEMENT_AMOUNT": fallback_safe_amount(capture.settlement_amount),
        "PAYMENT_ID": capture.payment_id,
        "SHIPMENT_ID": capture.shipment_id,
        "SETTLEMENT_ID": capture.settlement_id,
        "CREATED_AT": fallback_safe_date(capture.created_at),
    }


@dataclass
class MollieCapture(Displayable):
    """Displays a single capture."""

    capture: Capture

    def kv(self) -> list[dict[str, Any]]:
        return [build_capture_row(self.capture)]

    def cols(self) -> list[str]:
        return list(_CAPTURE_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_CAPTURE_COL_MAP)


@dataclass
class MollieCapturesList(Displayable):
    """Displays a list of captures."""

    captures_list: CapturesList

    def kv(self) -> list[dict[str, Any]]:
        return [build_capture_row(c) for c in self.captures_list.captures]

    def cols(self) -> list[str]:
        return list(_CAPTURE_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_CAPTURE_COL_MAP)