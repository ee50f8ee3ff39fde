from molliecli.formatting import Amount
from molliecli.invoices import (
    Invoice,
    InvoicesList,
    MollieInvoice,
    MollieInvoiceList,
    build_invoice_row,
)


def _invoice(ident="inv_test", reference="2020.0001"):
    return Invoice(
        resource="invoice",
        id=ident,
        reference=reference,
        vat_number="NL000000000B00",
        status="paid",
        issued_at="2020-11-01",
        paid_at="2020-11-02",
        due_at="2020-11-15",
        net_amount=Amount(currency="EUR", value="10.00"),
    )


def test_resource_column_shows_reference():
    row = build_invoice_row(_invoice())
    assert row["RESOURCE"] == "2020.0001"
    assert row["REFERENCE"] == "2020.0001"


def test_raw_fields_pass_through():
    inv = _invoice()
    row = MollieInvoice(inv).kv()[0]
    assert row["ID"] == inv.id
    assert row["VAT_NUMBER"] == inv.vat_number
    assert row["STATUS"] == inv.status
    assert (row["ISSUED_AT"], row["PAID_AT"], row["DUE_AT"]) == (
        inv.issued_at,
        inv.paid_at,
        inv.due_at,
    )


def test_amounts():
    row = build_invoice_row(_invoice())
    assert row["NET_AMOUNT"] == "\u20ac10.00"
    assert row["VAT_AMOUNT"] == "--- ---"
    assert row["GROSS_AMOUNT"] == "--- ---"


def test_list_preserves_order():
    invoices = [_invoice("inv_a", "a"), _invoice("inv_b", "b")]
    disp = MollieInvoiceList(InvoicesList(count=2, invoices=invoices))
    rows = disp.kv()
    assert [r["ID"] for r in rows] == ["inv_a", "inv_b"]
    assert rows == [build_invoice_row(i) for i in invoices]


def test_columns_consistent():
    disp = MollieInvoice(Invoice())
    assert set(disp.kv()[0]) == set(disp.cols())
    assert set(disp.col_map()) == set(disp.cols())
    assert MollieInvoiceList(InvoicesList()).cols() == disp.cols()