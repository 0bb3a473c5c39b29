from __future__ import annotations
from pydantic import BaseModel
from typing import Dict, Tuple

# --- Tipos de fila ---
HeaderSet = Tuple[str, ...]
RawRow = Dict[str, str]

class OutputRecord(BaseModel):
    """Una fila del CSV de importación de Xero."""
    date: str
    amount: str = ""
    payee: str = ""
    description: str = ""
    reference: str = ""
    cheque_number: str = ""
    transaction_type: str = ""

    def to_row(self) -> list[str]:
        # Mismo orden que OUTPUT_HEADERS
        return [
            self.date,
            self.amount,
            self.payee,
            self.description,
            self.reference,
            self.cheque_number,
            self.transaction_type,
        ]

class TransformStats(BaseModel):
    rows_read: int = 0       # filas de datos vistas después del header
    transactions: int = 0    # filas aceptadas (= filas escritas)
    skipped: int = 0         # filtradas (fecha vacía, <nil>, marcadores)
    malformed: int = 0       # cantidad de columnas distinta al header

    def to_dict(self) -> Dict:
        return self.model_dump()
