"""Shared configuration for the matrix HTTP service.

Values come from the environment (or a ``.env`` file at the project root)
and fall back to the defaults below.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Listener address for ``matrix-service`` / ``python -m matrix_service.web.app``
HOST = os.getenv("MATRIX_HOST", "0.0.0.0")
PORT = int(os.getenv("MATRIX_PORT", "8080"))

LOG_LEVEL = os.getenv("MATRIX_LOG_LEVEL", "INFO").upper()

# Uploads larger than this are rejected before decoding (413)
MAX_UPLOAD_BYTES = int(os.getenv("MATRIX_MAX_UPLOAD_BYTES", str(1024 * 1024)))

# Multipart form field carrying the CSV upload, and the required filename suffix
FILE_FIELD = "file"
CSV_EXTENSION = ".csv"
