from __future__ import annotations
import csv
from typing import TextIO

from xero_transform.core.constants import OUTPUT_HEADERS
from xero_transform.core.models import OutputRecord

class XeroCsvWriter:
    """
    Escribe el CSV de importación de Xero.
    Cada registro se flushea apenas se escribe.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._writer = csv.writer(stream)
        self.records_written = 0

    def write_header(self) -> None:
        self._writer.writerow(OUTPUT_HEADERS)
        self.stream.flush()

    def write_record(self, record: OutputRecord) -> None:
        self._writer.writerow(record.to_row())
        self.stream.flush()
        self.records_written += 1

def open_csv_output(path: str) -> TextIO:
    return open(path, "w", encoding="utf-8", newline="")
