from datetime import datetime

from molliecli.customers import (
    Customer,
    CustomersList,
    MollieCustomer,
    MollieCustomerList,
)
from molliecli.formatting import URL, PaginationLinks

WHEN = datetime(2020, 12, 24)


def _make(ident, name, email, locale):
    return Customer(
        resource="customer",
        id=ident,
        name=name,
        email=email,
        locale=locale,
        created_at=WHEN,
        mode="test",
    )


def _row(ident, name, email, locale):
    return {
        "CREATED_AT": "24-12-2020",
        "EMAIL": email,
        "ID": ident,
        "LOCALE": locale,
        "METADATA": None,
        "MODE": "test",
        "NAME": name,
        "RESOURCE": "customer",
    }


FIRST = ("cs_test", "test customer", "test@example.com", "de_DE")
SECOND = ("cs_test_2", "test customer 2", "test2@example.com", "es_ES")


def test_mollie_customer_kv():
    assert MollieCustomer(_make(*FIRST)).kv() == [_row(*FIRST)]


def test_mollie_customers_list_kv():
    link = URL(href="https://example.com", type="text/html")
    disp = MollieCustomerList(
        CustomersList(
            count=2,
            customers=[_make(*FIRST), _make(*SECOND)],
            links=PaginationLinks(self_link=link, documentation=link),
        )
    )
    want = [_row(*FIRST), _row(*SECOND)]
    assert len(want) == disp.customers_list.count
    assert disp.kv() == want


def test_metadata_passes_through():
    meta = {"metadata": "order 12"}
    row = MollieCustomer(Customer(metadata=meta)).kv()[0]
    assert row["METADATA"] == meta


def test_columns_match_col_map():
    disp = MollieCustomerList(CustomersList())
    assert set(disp.cols()) == set(disp.col_map())
    assert disp.kv() == []