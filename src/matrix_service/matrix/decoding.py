"""Decode uploaded CSV bytes into a validated square ``Matrix``.

Steps: bytes -> text (UTF-8, BOM dropped) -> raw table via the ``csv``
module -> empty / square checks -> ``Matrix``.  Every failure is raised as a
``MatrixError`` with the matching kind; nothing is repaired or defaulted.
"""

import csv
import io
import logging

from matrix_service.matrix.errors import MatrixError, MatrixErrorKind
from matrix_service.matrix.patterns import CELL_DELIMITER, QUOTE_CHAR
from matrix_service.matrix.schema import Matrix, is_square

logger = logging.getLogger(__name__)

__all__ = ["decode_and_validate", "decode_text", "is_square", "parse_table"]


def decode_text(raw: bytes) -> str:
    """Decode upload bytes as UTF-8, dropping a leading byte-order mark."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MatrixError(MatrixErrorKind.MALFORMED_INPUT, f"file is not valid UTF-8 text: {exc.reason}") from exc


def _reject_bare_quotes(text: str) -> None:
    """Raise MALFORMED_INPUT for a quote inside a field that did not start with one.

    The csv module keeps such quotes as literal text; they are rejected here instead.
    """
    in_quotes = False
    field_start = True
    line = 1
    i = 0
    while i < len(text):
        char = text[i]
        if in_quotes:
            if char == QUOTE_CHAR:
                if text[i + 1 : i + 2] == QUOTE_CHAR:
                    i += 1
                else:
                    in_quotes = False
        elif char == QUOTE_CHAR:
            if not field_start:
                raise MatrixError(MatrixErrorKind.MALFORMED_INPUT, f'malformed CSV at line {line}: bare " in non-quoted field')
            in_quotes = True
        field_start = not in_quotes and char in (CELL_DELIMITER, "\r", "\n")
        if char == "\n":
            line += 1
        i += 1


def parse_table(text: str) -> list[list[str]]:
    """Parse CSV text into a raw table of string cells.

    Blank lines carry no record and are skipped.  Rows are returned as-is;
    their widths are not checked here.
    """
    _reject_bare_quotes(text)
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=CELL_DELIMITER, strict=True)
    try:
        return [row for row in reader if row]
    except csv.Error as exc:
        raise MatrixError(MatrixErrorKind.MALFORMED_INPUT, f"malformed CSV at line {reader.line_num}: {exc}") from exc


def decode_and_validate(raw: bytes) -> Matrix:
    """Turn upload bytes into a non-empty square ``Matrix``.

    Raises ``MatrixError`` with kind MALFORMED_INPUT, EMPTY_INPUT or NOT_SQUARE.
    """
    rows = parse_table(decode_text(raw))

    if not rows:
        raise MatrixError(MatrixErrorKind.EMPTY_INPUT, "there are no data in file")

    if not is_square(rows):
        raise MatrixError(
            MatrixErrorKind.NOT_SQUARE,
            "matrix should be square, number of rows are equal to the number of columns",
        )

    logger.debug("Decoded %dx%d matrix", len(rows), len(rows))
    return Matrix(rows=rows)
