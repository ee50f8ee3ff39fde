"""Customers and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from molliecli.formatting import (
    Displayable,
    PaginationLinks,
    fallback_safe_date,
    fallback_safe_locale,
    fallback_safe_mode,
)

_CUSTOMER_COLS = (
    "RESOURCE",
    "ID",
    "MODE",
    "NAME",
    "EMAIL",
    "LOCALE",
    "METADATA",
    "CREATED_AT",
)

_CUSTOMER_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "MODE": "the mode used to create this customer.",
    "NAME": "the full name of the customer",
    "EMAIL": "the email address of the customer",
    "LOCALE": "language to be used in the hosted payment pages shown to the consumer",
    "METADATA": "any data you like to attach to the customer",
    "CREATED_AT": "the customer\u2019s date and time of creation",
}


@dataclass
class Customer:
    """A customer record."""

    resource: str = ""
    id: str = ""
    mode: Any = ""
    name: str = ""
    email: str = ""
    locale: Any = ""
    metadata: Any = None
    created_at: datetime | None = None


@dataclass
class CustomersList:
    """A page of customers."""

    count: int = 0
    customers: list[Customer] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_customer_row(customer: Customer) -> dict[str, Any]:
    """The display row for one customer."""
    return {
        "RESOURCE": customer.resource,
        "ID": customer.id,
        "MODE": fallback_safe_mode(customer.mode),
        "NAME": customer.name,
        "EMAIL": customer.email,
        "LOCALE": fallback_safe_locale(customer.locale),
        "METADATA": customer.metadata,
        "CREATED_AT": fallback_safe_date(customer.created_at),
    }


@dataclass
class MollieCustomer(Displayable):
    """Displays a single customer."""

    customer: Customer

    def kv(self) -> list[dict[str, Any]]:
        return [build_customer_row(self.customer)]

    def cols(self) -> list[str]:
        return list(_CUSTOMER_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_CUSTOMER_COL_MAP)


@dataclass
class MollieCustomerList(Displayable):
    """Displays a list of customers."""

    customers_list: CustomersList

    def kv(self) -> list[dict[str, Any]]:
        return [build_customer_row(c) for c in self.customers_list.customers]

    def cols(self) -> list[str]:
        return list(_CUSTOMER_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_CUSTOMER_COL_MAP)