from datetime import date, datetime, timedelta
from enum import Enum

import pytest

from molliecli.formatting import (
    Amount,
    ApplicationFee,
    Displayable,
    display_money,
    fallback_safe_amount,
    fallback_safe_app_fee,
    fallback_safe_date,
    fallback_safe_issuers,
    fallback_safe_locale,
    fallback_safe_mode,
    fallback_safe_payment_method,
    fallback_safe_sequence,
)


class _Mode(str, Enum):
    TEST = "test"


class _Rows(Displayable):
    def kv(self):
        return [{"ID": "x"}]

    def cols(self):
        return ["ID"]

    def col_map(self):
        return {"ID": "the id"}


@pytest.mark.parametrize(
    "when, expected",
    [(datetime(2020, 11, 1), "01-11-2020"), (None, "----------")],
    ids=["non zero date", "zero date"],
)
def test_safe_expiration(when, expected):
    assert fallback_safe_date(when) == expected


def test_safe_date_two_days_later():
    start = datetime.strptime("04-11-2020", "%d-%m-%Y")
    assert fallback_safe_date(start + timedelta(days=2)) == "06-11-2020"


def test_safe_date_accepts_plain_date():
    assert fallback_safe_date(date(2020, 12, 24)) == "24-12-2020"


@pytest.mark.parametrize(
    "method, expected",
    [("paypal", "paypal"), ("", "none"), (None, "none")],
)
def test_safe_payment_method(method, expected):
    assert fallback_safe_payment_method(method) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Amount(currency="EUR", value="100.00"), "\u20ac100.00"),
        (Amount(currency="EUR", value="10.00"), "\u20ac10.00"),
        (Amount(currency="EUR", value="1.00"), "\u20ac1.00"),
        (Amount(currency="USD", value="2.00"), "$2.00"),
        (None, "--- ---"),
    ],
)
def test_safe_amount(amount, expected):
    assert fallback_safe_amount(amount) == expected


def test_safe_amount_unparsable_value_counts_as_zero():
    assert fallback_safe_amount(Amount(currency="EUR", value="abc")) == "\u20ac0.00"


def test_display_money_groups_thousands():
    assert display_money(123456789, "EUR") == "\u20ac1,234,567.89"


def test_display_money_negative_and_small():
    assert display_money(-150, "EUR") == "-\u20ac1.50"
    assert display_money(5, "USD") == "$0.05"


def test_display_money_lowercase_code():
    assert display_money(100, "eur") == display_money(100, "EUR")


def test_display_money_unknown_currency_is_empty():
    assert display_money(100, "XXX") == ""


def test_app_fee():
    assert fallback_safe_app_fee(None) == "none"
    fee = ApplicationFee(amount=Amount(currency="EUR", value="1.00"))
    assert fallback_safe_app_fee(fee) == "\u20ac1.00"
    assert fallback_safe_app_fee(ApplicationFee()) == "--- ---"


def test_issuers():
    assert fallback_safe_issuers([]) == "N/A"
    assert fallback_safe_issuers(None) == "N/A"
    assert fallback_safe_issuers(["a", "b"]) == "2"


def test_text_fallbacks():
    assert fallback_safe_locale("de_DE") == "de_DE"
    assert fallback_safe_locale("") == ""
    assert fallback_safe_mode(_Mode.TEST) == "test"
    assert fallback_safe_mode(None) == ""
    assert fallback_safe_sequence("") == ""


def test_displayable_defaults():
    rows = _Rows()
    assert Displayable.no_headers(rows) is False
    assert Displayable.filterable(rows) is True


def test_displayable_is_abstract():
    with pytest.raises(TypeError):
        Displayable()