"""Fixed value lists offered when prompting for payment details."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum

SHORT_DATE_FORMAT = "%Y-%m-%d"


class SequenceType(str, Enum):
    """Where a payment sits in a recurring sequence."""

    ONE_OFF = "oneoff"
    FIRST = "first"
    RECURRING = "recurring"


class PaymentMethod(str, Enum):
    """Payment method identifiers."""

    APPLE_PAY = "applepay"
    BANCONTACT = "bancontact"
    BANK_TRANSFER = "banktransfer"
    BELFIUS = "belfius"
    CREDIT_CARD = "creditcard"
    DIRECT_DEBIT = "directdebit"
    EPS = "eps"
    GIFT_CARD = "giftcard"
    GIROPAY = "giropay"
    IDEAL = "ideal"
    KBC = "kbc"
    KLARNA_PAY_LATER = "klarnapaylater"
    KLARNA_SLICE_IT = "klarnasliceit"
    MYBANK = "mybank"
    PAYPAL = "paypal"
    PAYSAFECARD = "paysafecard"
    PRZELEWY24 = "przelewy24"
    SOFORT = "sofort"


_LOCALES = (
    "en_US",
    "nl_NL",
    "nl_BE",
    "fr_FR",
    "fr_BE",
    "de_DE",
    "de_AT",
    "de_CH",
    "es_ES",
    "ca_ES",
    "pt_PT",
    "it_IT",
    "nb_NO",
    "sv_SE",
    "fi_FI",
    "da_DK",
    "is_IS",
    "hu_HU",
    "pl_PL",
    "lv_LV",
    "lt_LT",
)

GIFT_CARD_ISSUERS = (
    "bloemencadeaukaart",
    "boekenbon",
    "decadeaukaart",
    "delokalecadeaukaart",
    "dinercadeau",
    "fashioncheque",
    "festivalcadeau",
    "good4fun",
    "kluscadeau",
    "kunstencultuurcadeaukaart",
    "nationalebioscoopbon",
    "nationaleentertainmentcard",
    "nationalegolfbon",
    "ohmygood",
    "podiumcadeaukaart",
    "reiscadeau",
    "restaurantcadeau",
    "sportenfitcadeau",
    "sustainablefashion",
    "travelcheq",
    "vvvgiftcard",
    "vvvdinercheque",
    "vvvlekkerweg",
    "webshopgiftcard",
    "yourgift",
)


def mollie_locales() -> list[str]:
    """All locales a payment page can be shown in."""
    return list(_LOCALES)


def sequence_types() -> list[str]:
    """The sequence types in the order they are offered."""
    return [member.value for member in SequenceType]


def kbc_issuers() -> list[str]:
    """The issuers available for KBC/CBC payments."""
    return ["kbc", "cbc"]


def default_due_date(today: date | None = None) -> str:
    """The suggested due date: the day after ``today``, as YYYY-MM-DD."""
    base = today if today is not None else date.today()
    return (base + timedelta(days=1)).strftime(SHORT_DATE_FORMAT)


def parse_short_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD date, raising ValueError otherwise."""
    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc