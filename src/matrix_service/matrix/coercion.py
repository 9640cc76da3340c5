"""All-or-nothing conversion of matrix cells to 64-bit signed integers.

Integer matrices are built on demand by the sum and product operations and
never outlive a single call.  Arithmetic on them follows fixed 64-bit
two's-complement semantics: ``wrap_int64`` folds any result back into range.
"""

from matrix_service.matrix.errors import MatrixError, MatrixErrorKind
from matrix_service.matrix.patterns import INT64_BITS, INT64_MAX, INT64_MIN, INTEGER_CELL_RE
from matrix_service.matrix.schema import Matrix

_INT64_MODULUS = 1 << INT64_BITS


def wrap_int64(value: int) -> int:
    """Reduce *value* to the signed 64-bit range, wrapping like two's complement."""
    return (value - INT64_MIN) % _INT64_MODULUS + INT64_MIN


def parse_integer(cell: str) -> int | None:
    """Parse a base-10 signed integer cell, or return None if it is not one.

    Values outside the signed 64-bit range are not integers.
    """
    if not INTEGER_CELL_RE.match(cell):
        return None
    value = int(cell)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def to_integers(matrix: Matrix) -> list[list[int]]:
    """Convert every cell of *matrix* to an int, row-major.

    Raises ``MatrixError(NOT_INTEGER)`` on the first cell that does not parse;
    no partial result is returned.
    """
    result: list[list[int]] = []
    for i, row in enumerate(matrix.rows):
        converted: list[int] = []
        for j, cell in enumerate(row):
            value = parse_integer(cell)
            if value is None:
                raise MatrixError(
                    MatrixErrorKind.NOT_INTEGER,
                    f"only Integer value is allowed, got {cell!r} at row {i + 1}, column {j + 1}",
                )
            converted.append(value)
        result.append(converted)
    return result
