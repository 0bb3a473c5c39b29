from __future__ import annotations

import csv
from typing import Iterator, TextIO

from xero_transform.core.errors import MalformedInputError

def read_csv_rows(stream: TextIO) -> Iterator[list[str]]:
    """
    Itera las filas del CSV tal cual (strings, sin header asumido).
    Las líneas vacías se saltan. Cualquier error de lectura es fatal.
    """
    reader = csv.reader(stream, strict=True)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError) as e:
            raise MalformedInputError(f"line {reader.line_num}: {e}") from e
        if row:
            yield row

def open_csv_input(path: str) -> TextIO:
    # utf-8-sig: algunos exports traen BOM al inicio
    return open(path, "r", encoding="utf-8-sig", newline="")
