from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence

from xero_transform.core.errors import RowShapeError
from xero_transform.core.models import HeaderSet, OutputRecord, TransformStats
from xero_transform.data.cleaning import skip_reason
from xero_transform.data.export import XeroCsvWriter
from xero_transform.data.header_detection import locate_header
from xero_transform.data.mapping import build_raw_row
from xero_transform.engine.rules import build_output_record

logger = logging.getLogger(__name__)

def iter_output_records(
    rows: Iterable[Sequence[str]],
    headers: HeaderSet,
    stats: TransformStats,
) -> Iterator[OutputRecord]:
    """
    Recorre las filas de datos (ya sin header) y genera un OutputRecord
    por cada transacción aceptada, en el mismo orden de entrada.
    """
    for row in rows:
        stats.rows_read += 1
        try:
            raw = build_raw_row(headers, row)
        except RowShapeError as e:
            stats.malformed += 1
            logger.warning("Skipping malformed row %d (%s): %s", stats.rows_read, e, list(row))
            continue

        logger.debug("Next transaction: %s", raw)

        reason = skip_reason(raw)
        if reason:
            stats.skipped += 1
            logger.debug("Skipping row %d: %s", stats.rows_read, reason)
            continue

        stats.transactions += 1
        yield build_output_record(raw)

def transform(
    rows: Iterable[Sequence[str]],
    writer: XeroCsvWriter,
    stats: Optional[TransformStats] = None,
) -> TransformStats:
    """
    Ubica el header, escribe el header de Xero y luego cada registro.
    HeaderNotFoundError / MalformedInputError se propagan al caller.
    """
    stats = stats if stats is not None else TransformStats()
    it = iter(rows)

    headers = locate_header(it)
    writer.write_header()

    for record in iter_output_records(it, headers, stats):
        writer.write_record(record)

    return stats
