"""Square-matrix decoding, validation, and operations.

Submodules:
  errors      -- MatrixErrorKind enum and MatrixError exception
  patterns    -- compiled regex patterns and integer bounds
  schema      -- Matrix Pydantic model
  decoding    -- CSV parsing and square validation
  coercion    -- all-or-nothing conversion of cells to 64-bit integers
  operations  -- render, transpose, flatten, sum, and multiply
"""
