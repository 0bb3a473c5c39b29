from __future__ import annotations


class TransformError(Exception):
    """Error fatal: corta toda la corrida."""


class MalformedInputError(TransformError):
    pass


class HeaderNotFoundError(TransformError):
    def __init__(self, message: str = "Unable to read header row"):
        super().__init__(message)


class RowShapeError(Exception):
    """
    Fila con distinta cantidad de columnas que el header.
    No es fatal: el transform la salta y la cuenta en stats.malformed.
    """

    def __init__(self, expected: int, actual: int):
        super().__init__(f"expected {expected} columns, got {actual}")
        self.expected = expected
        self.actual = actual
