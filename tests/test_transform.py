import csv
import io

import pytest

from xero_transform.core.constants import OUTPUT_HEADERS
from xero_transform.core.errors import HeaderNotFoundError
from xero_transform.core.models import TransformStats
from xero_transform.data.export import XeroCsvWriter
from xero_transform.engine.transform import iter_output_records, transform


def _run(rows):
    buf = io.StringIO()
    stats = transform(rows, XeroCsvWriter(buf))
    out = list(csv.reader(io.StringIO(buf.getvalue())))
    return out, stats


def test_transform_example_file(raw_header):
    rows = [
        ["Statement for account 1234", "", "", "", "", ""],
        raw_header,
        ["2024-01-05", "POS PURCHASE", "Groceries", "REF123", "", "42.50"],
        ["2024-01-06", "DEPOSIT", "Salary", "REF999", "1000.00", ""],
    ]
    out, stats = _run(rows)
    assert out[0] == list(OUTPUT_HEADERS)
    assert out[1] == ["2024-01-05", "-42.50", "", "Groceries", "POS PURCHASE REF123", "", "Debit"]
    assert out[2] == ["2024-01-06", "1000.00", "", "Salary", "DEPOSIT REF999", "", "Credit"]
    assert stats.transactions == 2


def test_filtered_rows_are_not_counted(raw_header):
    rows = [
        raw_header,
        ["Transactions", "", "", "", "", ""],
        ["<nil>", "X", "Y", "Z", "1.00", ""],
        ["", "X", "Y", "Z", "1.00", ""],
        list(raw_header),
        ["2024-01-05", "POS PURCHASE", "Groceries", "REF123", "", "42.50"],
    ]
    out, stats = _run(rows)
    assert len(out) == 2
    assert stats.transactions == 1
    assert stats.skipped == 4
    assert stats.rows_read == 5


def test_transaction_count_matches_written_rows(raw_header):
    rows = [raw_header] + [
        [f"2024-02-{d:02d}", "D", "C", "B", "", "1.00"] for d in range(1, 11)
    ] + [["Transactions", "", "", "", "", ""]]
    out, stats = _run(rows)
    assert stats.transactions == len(out) - 1 == 10


def test_malformed_rows_are_dropped_and_counted(raw_header):
    rows = [
        raw_header,
        ["2024-01-05", "SHORT ROW"],
        ["2024-01-06", "DEPOSIT", "Salary", "REF999", "1000.00", "", "EXTRA"],
        ["2024-01-07", "DEPOSIT", "Salary", "REF1", "5.00", ""],
    ]
    out, stats = _run(rows)
    assert stats.malformed == 2
    assert stats.transactions == 1
    assert out[1][0] == "2024-01-07"


def test_header_not_found_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(HeaderNotFoundError):
        transform([["no", "header"], ["here", "either"]], XeroCsvWriter(buf))
    assert buf.getvalue() == ""


def test_preamble_is_never_inspected(raw_header):
    # filas antes del header que parecen datos no se emiten
    rows = [
        ["2024-01-01", "LOOKS LIKE DATA", "x", "y", "1.00", ""],
        raw_header,
    ]
    out, stats = _run(rows)
    assert out == [list(OUTPUT_HEADERS)]
    assert stats.rows_read == 0


def test_iter_output_records_uses_given_stats():
    headers = ("Date", "Description", "Customer Reference", "Bank Reference", "Credit", "Debit")
    stats = TransformStats(transactions=5)
    records = list(iter_output_records([["d", "a", "b", "c", "", "2"]], headers, stats))
    assert len(records) == 1
    assert stats.transactions == 6
