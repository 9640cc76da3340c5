"""Pure operations over a validated ``Matrix``.

Text outputs share one rendering rule: cells joined by ",", one line per
row, each line ending in "\n".  Cells that contain a delimiter, quote, or
line break are CSV-quoted so the output decodes back to the same matrix.
"""

from matrix_service.matrix.coercion import to_integers, wrap_int64
from matrix_service.matrix.patterns import CELL_DELIMITER, NEEDS_QUOTES_RE, QUOTE_CHAR, ROW_TERMINATOR
from matrix_service.matrix.schema import Matrix


def _format_cell(cell: str) -> str:
    """Quote a cell (doubling inner quotes) when it holds a delimiter, quote, or line break."""
    if not NEEDS_QUOTES_RE.search(cell):
        return cell
    return QUOTE_CHAR + cell.replace(QUOTE_CHAR, QUOTE_CHAR * 2) + QUOTE_CHAR


def _render_rows(rows) -> str:
    """Join cells with the delimiter and end every row with a newline."""
    lines = []
    for row in rows:
        # A lone empty cell would otherwise be a blank line, which decoding skips
        if len(row) == 1 and not row[0]:
            lines.append(QUOTE_CHAR * 2)
        else:
            lines.append(CELL_DELIMITER.join(_format_cell(cell) for cell in row))
    return "".join(line + ROW_TERMINATOR for line in lines)


def render(matrix: Matrix) -> str:
    """Render the matrix unchanged: one comma-joined line per row."""
    return _render_rows(matrix.rows)


def transpose_rows(rows) -> list[list[str]]:
    """Swap rows and columns of an R x C table, giving C rows of R cells."""
    if not rows:
        return []
    n_cols = len(rows[0])
    return [[row[j] for row in rows] for j in range(n_cols)]


def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose, ``result[j][i] == matrix[i][j]``."""
    return Matrix(rows=transpose_rows(matrix.rows))


def flatten(matrix: Matrix) -> str:
    """Render every cell on a single line, row-major."""
    return _render_rows([[cell for row in matrix.rows for cell in row]])


def matrix_sum(matrix: Matrix) -> int:
    """Sum of all cells as a wrapping 64-bit integer."""
    total = 0
    for row in to_integers(matrix):
        for value in row:
            total = wrap_int64(total + value)
    return total


def multiply(matrix: Matrix) -> int:
    """Product of all cells as a wrapping 64-bit integer."""
    product = 1
    for row in to_integers(matrix):
        for value in row:
            product = wrap_int64(product * value)
    return product
