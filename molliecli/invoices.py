"""Invoices and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from molliecli.formatting import (
    Amount,
    Displayable,
    PaginationLinks,
    fallback_safe_amount,
)

_INVOICE_COLS = (
    "RESOURCE",
    "ID",
    "REFERENCE",
    "VAT_NUMBER",
    "STATUS",
    "ISSUED_AT",
    "PAID_AT",
    "DUE_AT",
    "NET_AMOUNT",
    "VAT_AMOUNT",
    "GROSS_AMOUNT",
)

_INVOICE_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "REFERENCE": "a specific invoice number / reference",
    "VAT_NUMBER": "invoices from a specific year",
    "STATUS": "status of the invoice",
    "ISSUED_AT": "the invoice date",
    "PAID_AT": "the date on which the invoice was paid",
    "DUE_AT": "the date on which the invoice is due",
    "NET_AMOUNT": "total amount of the invoice excluding VAT",
    "VAT_AMOUNT": "VAT amount of the invoice",
    "GROSS_AMOUNT": "total amount of the invoice including VAT",
}


@dataclass
class Invoice:
    """An invoice issued to the account."""

    resource: str = ""
    id: str = ""
    reference: str = ""
    vat_number: str = ""
    status: Any = ""
    issued_at: str = ""
    paid_at: str = ""
    due_at: str = ""
    net_amount: Amount | None = None
    vat_amount: Amount | None = None
    gross_amount: Amount | None = None


@dataclass
class InvoicesList:
    """A page of invoices."""

    count: int = 0
    invoices: list[Invoice] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_invoice_row(invoice: Invoice) -> dict[str, Any]:
    """The display row for one invoice.

    The RESOURCE column shows the invoice reference.
    """
    return {
        "RESOURCE": invoice.reference,
        "ID": invoice.id,
        "REFERENCE": invoice.reference,
        "VAT_NUMBER": invoice.vat_number,
        "STATUS": invoice.status,
        "ISSUED_AT": invoice.issued_at,
        "PAID_AT": invoice.paid_at,
        "DUE_AT": invoice.due_at,
        "NET_AMOUNT": fallback_safe_amount(invoice.net_amount),
        "VAT_AMOUNT": fallback_safe_amount(invoice.vat_amount),
        "GROSS_AMOUNT": fallback_safe_amount(invoice.gross_amount),
    }


@dataclass
class MollieInvoice(Displayable):
    """Displays a single invoice."""

    invoice: Invoice

    def kv(self) -> list[dict[str, Any]]:
        return [build_invoice_row(self.invoice)]

    def cols(self) -> list[str]:
        return list(_INVOICE_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_INVOICE_COL_MAP)


@dataclass
class MollieInvoiceList(Displayable):
    """Displays a list of invoices."""

    invoices_list: InvoicesList

    def kv(self) -> list[dict[str, Any]]:
        return [build_invoice_row(i) for i in self.invoices_list.invoices]

    def cols(self) -> list[str]:
        return list(_INVOICE_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_INVOICE_COL_MAP)