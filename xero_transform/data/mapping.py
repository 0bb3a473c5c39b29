from __future__ import annotations
from typing import Sequence

from xero_transform.core.errors import RowShapeError
from xero_transform.core.models import HeaderSet, RawRow

def build_raw_row(headers: HeaderSet, row: Sequence[str]) -> RawRow:
    # Una fila más corta o más larga mapearía montos en la columna equivocada
    if len(row) != len(headers):
        raise RowShapeError(len(headers), len(row))
    return dict(zip(headers, row))
