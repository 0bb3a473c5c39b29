from __future__ import annotations
from xero_transform.core.constants import TransactionType
from xero_transform.core.models import OutputRecord, RawRow
from xero_transform.data.cleaning import is_blank

def derive_amount(raw: RawRow) -> tuple[str, str]:
    """
    Retorna (amount, transaction_type) a partir de las columnas Credit / Debit.
    Se evalúan las dos en orden fijo: si vienen ambas, Debit pisa a Credit.
    Si no hay ninguna, ambos quedan vacíos (la fila igual se emite).
    """
    amount = ""
    tx_type = ""

    credit = raw.get("Credit")
    if not is_blank(credit):
        amount = credit
        tx_type = TransactionType.CREDIT.value

    debit = raw.get("Debit")
    if not is_blank(debit):
        amount = "-" + debit
        tx_type = TransactionType.DEBIT.value

    return amount, tx_type

def build_output_record(raw: RawRow) -> OutputRecord:
    amount, tx_type = derive_amount(raw)
    return OutputRecord(
        date=raw.get("Date", ""),
        amount=amount,
        payee="",
        description=raw.get("Customer Reference", ""),
        # sin strip: se concatena tal cual viene
        reference=raw.get("Description", "") + " " + raw.get("Bank Reference", ""),
        cheque_number="",
        transaction_type=tx_type,
    )
