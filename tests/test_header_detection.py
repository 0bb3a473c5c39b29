import pytest

from xero_transform.core.errors import HeaderNotFoundError
from xero_transform.data.header_detection import (
    is_header_row,
    locate_header,
    normalize_header,
    normalize_headers,
)


def test_normalize_known_labels():
    assert normalize_header(" Date") == "Date"
    assert normalize_header("Bank     Reference") == "Bank Reference"
    assert normalize_header("Customer  Reference") == "Customer Reference"
    assert normalize_header("Running  Balance  ") == "Running Balance"


def test_normalize_leaves_other_labels_untouched():
    assert normalize_header("Description") == "Description"
    assert normalize_header(" Description ") == " Description "
    # solo el match exacto se corrige
    assert normalize_header("Bank  Reference") == "Bank  Reference"


def test_normalize_is_idempotent(raw_header):
    once = normalize_headers(raw_header + ["Running  Balance  ", "Extra"])
    assert normalize_headers(once) == once


def test_is_header_row_needs_both_cells():
    assert is_header_row([" Date", "Description", "Credit"])
    assert not is_header_row(["Date", "Description"])
    assert not is_header_row([" Date"])
    assert not is_header_row([])


def test_locate_header_skips_preamble(raw_header):
    rows = iter([
        ["Account Statement", "", "", "", "", ""],
        ["Transactions", "", "", "", "", ""],
        raw_header,
        ["2024-01-05", "POS PURCHASE", "Groceries", "REF123", "", "42.50"],
    ])
    headers = locate_header(rows)
    assert headers == ("Date", "Description", "Customer Reference", "Bank Reference", "Credit", "Debit")
    # el iterador queda en la primera fila de datos
    assert next(rows)[0] == "2024-01-05"


def test_locate_header_not_found():
    rows = iter([["foo", "bar"], ["Date", "Description"]])
    with pytest.raises(HeaderNotFoundError, match="Unable to read header row"):
        locate_header(rows)
