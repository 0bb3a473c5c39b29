from __future__ import annotations

from typing import Optional

from xero_transform.core.constants import NIL_SENTINEL, RAW_DATE_HEADER, SECTION_MARKER
from xero_transform.core.models import RawRow

def is_blank(value: Optional[str]) -> bool:
    """Vacío, ausente o el placeholder literal "<nil>" del export."""
    return not value or value == NIL_SENTINEL

def skip_reason(raw: RawRow) -> Optional[str]:
    """
    Retorna por qué la fila no es una transacción, o None si hay que emitirla.
    """
    date = raw.get("Date")

    if is_blank(date):
        return "empty date"
    # separador de sección dentro del export
    if date == SECTION_MARKER:
        return "section marker"
    # header repetido a mitad de archivo
    if date == RAW_DATE_HEADER:
        return "repeated header"

    return None
