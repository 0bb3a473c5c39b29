from __future__ import annotations

import logging
from typing import Iterator, Sequence

from xero_transform.core.constants import HEADER_ALIASES, HEADER_SIGNATURE
from xero_transform.core.errors import HeaderNotFoundError
from xero_transform.core.models import HeaderSet

logger = logging.getLogger(__name__)

def normalize_header(label: str) -> str:
    """
    Corrige los labels con espacios raros del export del banco.
    Solo match exacto contra HEADER_ALIASES; el resto pasa sin tocar
    (NO se hace strip ni colapso de espacios).
    """
    for raw, canonical in HEADER_ALIASES:
        if label == raw:
            return canonical
    return label

def normalize_headers(row: Sequence[str]) -> HeaderSet:
    return tuple(normalize_header(h) for h in row)

def is_header_row(row: Sequence[str]) -> bool:
    if len(row) < len(HEADER_SIGNATURE):
        return False
    return tuple(row[:len(HEADER_SIGNATURE)]) == HEADER_SIGNATURE

def locate_header(rows: Iterator[Sequence[str]]) -> HeaderSet:
    """
    Consume filas hasta encontrar el header real y retorna los headers normalizados.
    El export trae basura antes del header: esas filas se descartan sin mirarlas.
    El iterador queda posicionado justo después del header.
    """
    discarded = 0
    for row in rows:
        if is_header_row(row):
            headers = normalize_headers(row)
            logger.debug("File headers: %s (after %d preamble rows)", list(headers), discarded)
            return headers
        discarded += 1

    raise HeaderNotFoundError()
