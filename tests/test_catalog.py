from datetime import date, timedelta

import pytest

from molliecli.catalog import (
    PaymentMethod,
    SequenceType,
    default_due_date,
    kbc_issuers,
    mollie_locales,
    parse_short_date,
)
from molliecli.catalog import sequence_types


def test_locales_include_known_entries_without_duplicates():
    locales = mollie_locales()
    assert "de_DE" in locales
    assert "es_ES" in locales
    assert len(locales) == len(set(locales))


def test_locales_returns_fresh_copy():
    first = mollie_locales()
    snapshot = list(first)
    first.clear()
    assert mollie_locales() == snapshot


def test_sequence_types_match_enum():
    assert sequence_types() == [SequenceType.ONE_OFF.value, SequenceType.FIRST.value, SequenceType.RECURRING.value]
    assert SequenceType("oneoff") is SequenceType.ONE_OFF


def test_kbc_issuers():
    assert kbc_issuers() == ["kbc", "cbc"]


def test_payment_method_lookup():
    assert PaymentMethod("paypal") is PaymentMethod.PAYPAL
    assert PaymentMethod("banktransfer") is PaymentMethod.BANK_TRANSFER
    with pytest.raises(ValueError):
        PaymentMethod("cash")


def test_default_due_date_is_next_day():
    assert default_due_date(date(2020, 11, 4)) == "2020-11-05"


@pytest.mark.parametrize("today", [date(2020, 12, 31), date(2024, 2, 28), date(2023, 6, 15)])
def test_due_date_round_trip(today):
    assert parse_short_date(default_due_date(today)) == today + timedelta(days=1)


@pytest.mark.parametrize("value", ["", "2020-1-5", "05-01-2020", "2020-13-01", "not a date"])
def test_parse_short_date_rejects(value):
    with pytest.raises(ValueError):
        parse_short_date(value)