from molliecli.captures import (
    Capture,
    CapturesList,
    MollieCapture,
    MollieCapturesList,
    build_capture_row,
)
from molliecli.formatting import URL, PaginationLinks

EXPECTED_ROW = {
    "AMOUNT": "--- ---",
    "CREATED_AT": "----------",
    "ID": "cp_test",
    "MODE": "",
    "PAYMENT_ID": "",
    "RESOURCE": "captures",
    "SETTLEMENT_AMOUNT": "--- ---",
    "SETTLEMENT_ID": "",
    "SHIPMENT_ID": "",
}


def test_capture_kv():
    mc = MollieCapture(Capture(resource="captures", id="cp_test"))
    assert mc.kv() == [EXPECTED_ROW]


def test_captures_list_kv():
    link = URL(href="https://example.com", type="text/html")
    mcl = MollieCapturesList(
        CapturesList(
            count=1,
            captures=[Capture(resource="captures", id="cp_test")],
            links=PaginationLinks(self_link=link, documentation=link),
        )
    )
    want = [EXPECTED_ROW]
    assert len(want) == mcl.captures_list.count
    assert mcl.kv() == want


def test_row_keys_match_columns():
    mc = MollieCapture(Capture())
    assert set(build_capture_row(Capture())) == set(mc.cols())
    assert set(mc.col_map()) == set(mc.cols())


def test_columns_order():
    assert MollieCapturesList(CapturesList()).cols()[:3] == ["RESOURCE", "ID", "MODE"]


def test_empty_list_has_no_rows():
    assert MollieCapturesList(CapturesList()).kv() == []


def test_headers_and_filtering():
    mc = MollieCapture(Capture())
    assert mc.no_headers() is False
    assert mc.filterable() is True