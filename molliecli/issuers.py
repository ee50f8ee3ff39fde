"""Payment method issuers and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from molliecli.formatting import Displayable

_ISSUER_COLS = ("ID", "NAME", "IMAGE")

_ISSUER_COL_MAP = {
    "ID": "the issuer id",
    "NAME": "the issuer name",
    "IMAGE": "the issuer logo/image",
}


@dataclass
class Image:
    """Logo URLs in several sizes."""

    size1x: str = ""
    size2x: str = ""
    svg: str = ""


@dataclass
class PaymentMethodIssuer:
    """An issuer offered for a payment method, such as a bank."""

    resource: str = ""
    id: str = ""
    name: str = ""
    image: Image = field(default_factory=Image)


def build_issuer_row(issuer: PaymentMethodIssuer) -> dict[str, Any]:
    """The display row for one issuer; the image column shows the SVG logo."""
    return {
        "ID": issuer.id,
        "NAME": issuer.name,
        "IMAGE": issuer.image.svg,
    }


@dataclass
class MolliePaymentMethodIssuer(Displayable):
    """Displays a single issuer."""

    issuer: PaymentMethodIssuer

    def kv(self) -> list[dict[str, Any]]:
        return [build_issuer_row(self.issuer)]

    def cols(self) -> list[str]:
        return list(_ISSUER_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_ISSUER_COL_MAP)


@dataclass
class MollieListPaymentMethodsIssuers(Displayable):
    """Displays the issuers embedded in a payment method."""

    issuers: list[PaymentMethodIssuer] = field(default_factory=list)

    def kv(self) -> list[dict[str, Any]]:
        return [build_issuer_row(i) for i in self.issuers]

    def cols(self) -> list[str]:
        return list(_ISSUER_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_ISSUER_COL_MAP)