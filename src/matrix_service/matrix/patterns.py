"""Compiled regex patterns and numeric bounds for matrix cells."""

import re

# ─── Cell Patterns ────────────────────────────────────────────────────────────

# Base-10 signed integer: optional sign, ASCII digits only.
# No surrounding whitespace, no "_" separators, no non-ASCII digits.
INTEGER_CELL_RE = re.compile(r"^[+-]?[0-9]+$")


# ─── 64-bit Integer Bounds ───────────────────────────────────────────────────

INT64_BITS = 64
INT64_MIN = -(1 << (INT64_BITS - 1))
INT64_MAX = (1 << (INT64_BITS - 1)) - 1


# ─── CSV Dialect ─────────────────────────────────────────────────────────────

CELL_DELIMITER = ","
ROW_TERMINATOR = "\n"
QUOTE_CHAR = '"'

# Cells containing any of these must be quoted to decode back unchanged
NEEDS_QUOTES_RE = re.compile(r'[,"\r\n]')
