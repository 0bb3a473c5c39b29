from __future__ import annotations

import re
from datetime import date, datetime, time
from pathlib import Path
from typing import Iterator, Union
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from xero_transform.core.errors import MalformedInputError

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
# Formato binario viejo: openpyxl no lo lee
LEGACY_EXCEL_SUFFIXES = (".xls",)

SheetRef = Union[str, int, None]

_DATE_TOKENS = re.compile(r"yyyy|yy|mmmm|mmm|mm|m|dddd|ddd|dd|d", re.IGNORECASE)
_DECIMALS = re.compile(r"0\.(0+)")

def is_excel_path(path: str) -> bool:
    return Path(path).suffix.lower() in EXCEL_SUFFIXES

def is_legacy_excel_path(path: str) -> bool:
    return Path(path).suffix.lower() in LEGACY_EXCEL_SUFFIXES

def ensure_supported_workbook(path: str) -> None:
    if is_legacy_excel_path(path):
        raise MalformedInputError(
            f"{path}: legacy .xls workbooks are not supported, save the statement as .xlsx or .csv"
        )

def _format_date(value: date, number_format: str | None) -> str:
    """
    Fecha con el formato de la celda (solo tokens de fecha: yyyy, mm, dd, mmm...).
    Si el formato trae hora o no se reconoce, se usa ISO; la hora solo si no es 00:00.
    """
    fmt = (number_format or "").split(";")[0]
    fmt = re.sub(r"\[[^\]]*\]", "", fmt).replace("\\", "").replace('"', "")
    is_date_only = fmt and not re.search(r"[hs]", fmt, re.IGNORECASE) and _DATE_TOKENS.search(fmt)

    if is_date_only:
        def render(m: re.Match) -> str:
            tok = m.group(0).lower()
            return {
                "yyyy": f"{value.year:04d}",
                "yy": f"{value.year % 100:02d}",
                "mmmm": value.strftime("%B"),
                "mmm": value.strftime("%b"),
                "mm": f"{value.month:02d}",
                "m": str(value.month),
                "dddd": value.strftime("%A"),
                "ddd": value.strftime("%a"),
                "dd": f"{value.day:02d}",
                "d": str(value.day),
            }[tok]
        return _DATE_TOKENS.sub(render, fmt)

    if isinstance(value, datetime) and value.time() != time(0, 0):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value.strftime("%Y-%m-%d")

def _format_number(value: float | int, number_format: str | None) -> str:
    fmt = (number_format or "General").split(";")[0]
    if fmt == "General" or not re.search(r"[0#]", fmt):
        # como lo muestra Excel: 42.5, 1000
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    m = _DECIMALS.search(fmt)
    decimals = len(m.group(1)) if m else 0
    grouped = "," in fmt.split(".")[0]
    return f"{value:,.{decimals}f}" if grouped else f"{value:.{decimals}f}"

def cell_text(value, number_format: str | None = None) -> str:
    """Texto de la celda tal como se ve en la planilla."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (datetime, date)):
        return _format_date(value, number_format)
    if isinstance(value, (int, float)):
        return _format_number(value, number_format)
    return str(value)

def _pick_sheet(wb, sheet: SheetRef):
    if sheet is None:
        return wb.worksheets[0]
    if isinstance(sheet, str) and sheet in wb.sheetnames:
        return wb[sheet]
    # "--sheet 1" = segunda hoja (índice base 0)
    if isinstance(sheet, int) or sheet.isdigit():
        idx = int(sheet)
        if idx < len(wb.worksheets):
            return wb.worksheets[idx]
    raise MalformedInputError(f"worksheet {sheet!r} not found (available: {', '.join(wb.sheetnames)})")

def read_excel_rows(path: str, sheet_name: SheetRef = None) -> Iterator[list[str]]:
    """
    Lee Excel SIN asumir que hay headers, cada celda como texto.
    Las celdas vacías quedan como "" (igual que en el CSV).
    """
    ensure_supported_workbook(path)
    try:
        wb = load_workbook(path, data_only=True)
    except (BadZipFile, InvalidFileException, KeyError, ValueError) as e:
        raise MalformedInputError(f"unable to read workbook {path}: {e}") from e

    ws = _pick_sheet(wb, sheet_name)
    for row in ws.iter_rows():
        yield [cell_text(c.value, c.number_format) for c in row]
