"""Pydantic model for a validated square matrix.

A ``Matrix`` is produced once by ``decoding.decode_and_validate`` and then
only read by the operations.  The model is frozen and stores rows as tuples,
so nothing can change it after validation.
"""

from pydantic import BaseModel, ConfigDict, model_validator


def is_square(rows) -> bool:
    """Return True if every row has exactly as many cells as there are rows.

    This is stricter than "all rows have equal length": a 2x3 table is
    rectangular but not square.
    """
    n_rows = len(rows)
    return all(len(row) == n_rows for row in rows)


class Matrix(BaseModel):
    """Non-empty R x R grid of text cells, not yet interpreted as numbers."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[str, ...], ...]

    @model_validator(mode="after")
    def validate_square(self) -> "Matrix":
        """Ensure the grid has at least one row and every row has len(rows) cells."""
        if not self.rows:
            raise ValueError("Matrix must have at least one row")
        if not is_square(self.rows):
            widths = sorted({len(row) for row in self.rows})
            raise ValueError(f"Matrix has {len(self.rows)} rows but row widths {widths}")
        return self

    @property
    def size(self) -> int:
        """Number of rows (equal to the number of columns)."""
        return len(self.rows)
