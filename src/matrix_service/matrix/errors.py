"""Error taxonomy for matrix decoding and integer operations."""

from enum import Enum


class MatrixErrorKind(str, Enum):
    """Every way a matrix request can fail inside the core."""

    EMPTY_INPUT = "empty_input"
    NOT_SQUARE = "not_square"
    NOT_INTEGER = "not_integer"
    MALFORMED_INPUT = "malformed_input"


class MatrixError(Exception):
    """Raised by the decoder and the integer operations.

    Callers branch on ``kind``; ``message`` is for humans only.
    """

    def __init__(self, kind: MatrixErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"MatrixError({self.kind.name}, {self.message!r})"
