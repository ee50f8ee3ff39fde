from molliecli.formatting import Amount, PaginationLinks, URL
from molliecli.issuers import Image, PaymentMethodIssuer
from molliecli.methods import (
    MollieListMethods,
    MollieMethod,
    PaymentMethodDetails,
    PaymentMethodsList,
    build_method_row,
)


def _image():
    return Image(
        size1x="https://example.com/logo-example/1.png",
        size2x="https://example.com/logo-example/2x.png",
        svg="https://example.com/logo-example/logo.svg",
    )


def _ideal():
    return PaymentMethodDetails(
        resource="methods",
        id="ideal",
        description="iDeal payments",
        minimum_amount=Amount(value="10.00", currency="EUR"),
        maximum_amount=Amount(value="100.00", currency="EUR"),
        image=_image(),
    )


def test_mollie_method_kv():
    disp = MollieMethod(_ideal())
    want = [{
        "DESCRIPTION": "iDeal payments",
        "ID": "ideal",
        "LOGO": "https://example.com/logo-example/1.png",
        "ISSUERS": "N/A",
        "MAX_AMOUNT": "\u20ac100.00",
        "MIN_AMOUNT": "\u20ac10.00",
        "RESOURCE": "methods",
    }]
    assert disp.kv() == want


def test_mollie_list_methods_kv():
    paypal = PaymentMethodDetails(
        resource="methods",
        id="paypal",
        description="Paypal",
        minimum_amount=Amount(value="10.00", currency="EUR"),
        maximum_amount=None,
        image=_image(),
    )
    disp = MollieListMethods(PaymentMethodsList(
        count=2,
        methods=[_ideal(), paypal],
        links=PaginationLinks(
            documentation=URL(href="https://example.com", type="text/html"),
            self_link=URL(href="https://example.com", type="text/html"),
        ),
    ))
    want = [
        {
            "DESCRIPTION": "iDeal payments",
            "ID": "ideal",
            "LOGO": "https://example.com/logo-example/1.png",
            "ISSUERS": "N/A",
            "MAX_AMOUNT": "\u20ac100.00",
            "MIN_AMOUNT": "\u20ac10.00",
            "RESOURCE": "methods",
        },
        {
            "DESCRIPTION": "Paypal",
            "ID": "paypal",
            "LOGO": "https://example.com/logo-example/1.png",
            "ISSUERS": "N/A",
            "MAX_AMOUNT": "--- ---",
            "MIN_AMOUNT": "\u20ac10.00",
            "RESOURCE": "methods",
        },
    ]
    assert disp.kv() == want


def test_issuers_are_counted():
    method = _ideal()
    method.issuers = [PaymentMethodIssuer(id="a"), PaymentMethodIssuer(id="b")]
    assert build_method_row(method)["ISSUERS"] == "2"


def test_cols_match_col_map_keys():
    single = MollieMethod(_ideal())
    many = MollieListMethods(PaymentMethodsList())
    assert set(single.cols()) == set(single.col_map())
    assert set(many.cols()) == set(many.col_map())
    assert single.cols() == many.cols()
    assert single.col_map()["ID"] == "the payment method id"
    assert many.col_map()["ID"] == "the resource id"


def test_row_keys_follow_cols():
    disp = MollieMethod(_ideal())
    assert list(disp.kv()[0]) == disp.cols()


def test_empty_list_has_no_rows():
    assert MollieListMethods(PaymentMethodsList()).kv() == []