from enum import Enum

class TransactionType(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"

# Primeras dos celdas del header real (el export trae un espacio delante de "Date")
HEADER_SIGNATURE = (" Date", "Description")

# Orden importa: se evalúa match exacto, el primero que coincide gana
HEADER_ALIASES = (
    (" Date", "Date"),
    ("Bank     Reference", "Bank Reference"),
    ("Customer  Reference", "Customer Reference"),
    ("Running  Balance  ", "Running Balance"),
)

NIL_SENTINEL = "<nil>"
SECTION_MARKER = "Transactions"
RAW_DATE_HEADER = " Date"

OUTPUT_HEADERS = (
    "*Date",
    "*Amount",
    "Payee",
    "Description",
    "Reference",
    "Cheque Number",
    "Transaction Type",
)
