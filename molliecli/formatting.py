"""Shared value types and fallback-safe formatting for tabular output."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, NamedTuple, Sequence

DISPLAY_DATE_FORMAT = "%d-%m-%Y"
NO_DATE_CONTENT = "----------"
NO_AMOUNT_CONTENT = "--- ---"
NO_APP_FEE = "none"
NO_PAYMENT_METHOD = "none"
NO_ISSUERS = "N/A"

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class Amount:
    """A monetary amount as sent by the API: a currency code and a decimal string."""

    currency: str = ""
    value: str = ""


@dataclass
class ApplicationFee:
    """An application fee attached to a payment."""

    amount: Amount | None = None
    description: str = ""


@dataclass
class URL:
    """A link with its media type."""

    href: str = ""
    type: str = ""


@dataclass
class PaginationLinks:
    """Navigation links returned with list resources."""

    self_link: URL | None = None
    previous: URL | None = None
    next: URL | None = None
    documentation: URL | None = None


class Displayable(abc.ABC):
    """Something that can be rendered as rows of named columns."""

    @abc.abstractmethod
    def kv(self) -> list[dict[str, Any]]:
        """Return one mapping of column name to value per row."""

    @abc.abstractmethod
    def cols(self) -> list[str]:
        """Return the available columns in display order."""

    @abc.abstractmethod
    def col_map(self) -> dict[str, str]:
        """Return every column with its description."""

    def no_headers(self) -> bool:
        """Whether headers should be left out of the output."""
        return False

    def filterable(self) -> bool:
        """Whether the output can be narrowed with the fields flag."""
        return True


class _Currency(NamedTuple):
    decimal: str
    thousand: str
    fraction: int
    grapheme: str
    template: str


_CURRENCIES: dict[str, _Currency] = {
    "AUD": _Currency(".", ",", 2, "$", "$1"),
    "CAD": _Currency(".", ",", 2, "$", "$1"),
    "CHF": _Currency(".", ",", 2, "CHF", "1 $"),
    "CZK": _Currency(",", ".", 2, "K\u010d", "1 $"),
    "DKK": _Currency(".", ",", 2, "kr", "1 $"),
    "EUR": _Currency(".", ",", 2, "\u20ac", "$1"),
    "GBP": _Currency(".", ",", 2, "\u00a3", "$1"),
    "ISK": _Currency(",", ".", 0, "kr", "1 $"),
    "JPY": _Currency(".", ",", 0, "\u00a5", "$1"),
    "NOK": _Currency(".", ",", 2, "kr", "1 $"),
    "PLN": _Currency(".", ",", 2, "z\u0142", "1 $"),
    "SEK": _Currency(".", ",", 2, "kr", "1 $"),
    "USD": _Currency(".", ",", 2, "$", "$1"),
}

_UNKNOWN_CURRENCY = _Currency("", "", 0, "", "")


def display_money(cents: int, currency: str) -> str:
    """Render an amount in minor units using the currency's symbol and layout.

    Currencies without a known layout render as an empty string, apart
    from the minus sign of a negative amount.
    """
    fmt = _CURRENCIES.get(currency.upper(), _UNKNOWN_CURRENCY)
    digits = str(abs(cents))
    if len(digits) <= fmt.fraction:
        digits = "0" * (fmt.fraction - len(digits) + 1) + digits
    if fmt.thousand:
        cut = len(digits) - fmt.fraction - 3
        while cut > 0:
            digits = digits[:cut] + fmt.thousand + digits[cut:]
            cut -= 3
    if fmt.fraction > 0:
        split = len(digits) - fmt.fraction
        digits = digits[:split] + fmt.decimal + digits[split:]
    text = fmt.template.replace("1", digits, 1).replace("$", fmt.grapheme, 1)
    return "-" + text if cents < 0 else text


def _parse_minor_units(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def fallback_safe_amount(amount: Amount | None) -> str:
    """Format an amount, or a placeholder when there is none."""
    if amount is None:
        return NO_AMOUNT_CONTENT
    cents = _parse_minor_units(amount.value.replace(".", ""))
    return display_money(cents, amount.currency)


def fallback_safe_date(when: date | None) -> str:
    """Format a date as day-month-year, or a placeholder when there is none."""
    if when is None:
        return NO_DATE_CONTENT
    return when.strftime(DISPLAY_DATE_FORMAT)


def fallback_safe_locale(locale: Any) -> str:
    """Return the locale as text, empty when unset."""
    return _text(locale)


def fallback_safe_mode(mode: Any) -> str:
    """Return the mode as text, empty when unset."""
    return _text(mode)


def fallback_safe_sequence(sequence: Any) -> str:
    """Return the sequence type as text, empty when unset."""
    return _text(sequence)


def fallback_safe_payment_method(method: Any) -> str:
    """Return the payment method as text, or "none" when unset."""
    text = _text(method)
    return text if text else NO_PAYMENT_METHOD


def fallback_safe_app_fee(fee: ApplicationFee | None) -> str:
    """Format an application fee's amount, or "none" when there is no fee."""
    if fee is None:
        return NO_APP_FEE
    return fallback_safe_amount(fee.amount)


def fallback_safe_issuers(issuers: Sequence[Any] | None) -> str:
    """Return the number of issuers, or "N/A" when there are none."""
    if not issuers:
        return NO_ISSUERS
    return str(len(issuers))