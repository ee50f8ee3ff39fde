"""Payment methods and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from molliecli.formatting import (
    Amount,
    Displayable,
    PaginationLinks,
    fallback_safe_amount,
    fallback_safe_issuers,
)
from molliecli.issuers import Image, PaymentMethodIssuer

_METHOD_COLS = (
    "RESOURCE",
    "ID",
    "DESCRIPTION",
    "ISSUERS",
    "MIN_AMOUNT",
    "MAX_AMOUNT",
    "LOGO",
)

_LIST_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "DESCRIPTION": "the method description",
    "ISSUERS": "the count of issuers for the payment method (when embed)",
    "MIN_AMOUNT": "the min. amount supported by the payment method",
    "MAX_AMOUNT": "the max. amount supported by the payment method",
    "LOGO": "the payment method logo (1x)",
}

_METHOD_COL_MAP = {
    "RESOURCE": "the resource name as specified by mollie",
    "ID": "the payment method id",
    "DESCRIPTION": "the payment method description",
    "ISSUERS": "the count of issuers for the payment method (when embed)",
    "MIN_AMOUNT": "the min. amount supported by the payment method",
    "MAX_AMOUNT": "the max. amount supported by the payment method",
    "LOGO": "the payment method logo (1x)",
}


@dataclass
class PaymentMethodDetails:
    """A payment method with its limits, logo and optional issuers."""

    resource: str = ""
    id: str = ""
    description: str = ""
    minimum_amount: Amount | None = None
    maximum_amount: Amount | None = None
    image: Image = field(default_factory=Image)
    issuers: list[PaymentMethodIssuer] = field(default_factory=list)


@dataclass
class PaymentMethodsList:
    """A list of payment methods."""

    count: int = 0
    methods: list[PaymentMethodDetails] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_method_row(method: PaymentMethodDetails) -> dict[str, Any]:
    """The display row for one payment method."""
    return {
        "RESOURCE": method.resource,
        "ID": method.id,
        "DESCRIPTION": method.description,
        "ISSUERS": fallback_safe_issuers(method.issuers),
        "MIN_AMOUNT": fallback_safe_amount(method.minimum_amount),
        "MAX_AMOUNT": fallback_safe_amount(method.maximum_amount),
        "LOGO": method.image.size1x,
    }


@dataclass
class MollieMethod(Displayable):
    """Displays a single payment method."""

    method: PaymentMethodDetails

    def kv(self) -> list[dict[str, Any]]:
        return [build_method_row(self.method)]

    def cols(self) -> list[str]:
        return list(_METHOD_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_METHOD_COL_MAP)


@dataclass
class MollieListMethods(Displayable):
    """Displays a list of payment methods."""

    methods_list: PaymentMethodsList

    def kv(self) -> list[dict[str, Any]]:
        return [build_method_row(m) for m in self.methods_list.methods]

    def cols(self) -> list[str]:
        return list(_METHOD_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_LIST_COL_MAP)