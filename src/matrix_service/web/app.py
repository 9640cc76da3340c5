"""FastAPI web server for the matrix service.

Every POST endpoint takes a multipart upload in the ``file`` field, decodes it
into a square matrix, and answers with the operation result as plain text.

Usage:
    python -m matrix_service.web.app
    # => Uvicorn running on http://0.0.0.0:8080

    curl -F 'file=@./data/matrix.csv' "localhost:8080/echo"
    curl -F 'file=@./data/matrix.csv' "localhost:8080/invert"
    curl -F 'file=@./data/matrix.csv' "localhost:8080/flatten"
    curl -F 'file=@./data/matrix.csv' "localhost:8080/sum"
    curl -F 'file=@./data/matrix.csv' "localhost:8080/multiply"
"""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.datastructures import UploadFile

from matrix_service import config
from matrix_service.matrix.decoding import decode_and_validate
from matrix_service.matrix.errors import MatrixError, MatrixErrorKind
from matrix_service.matrix.operations import flatten, matrix_sum, multiply, render, transpose
from matrix_service.matrix.schema import Matrix

logger = logging.getLogger(__name__)

# HTTP status returned for each core error kind
ERROR_STATUS: dict[MatrixErrorKind, int] = {
    MatrixErrorKind.EMPTY_INPUT: 400,
    MatrixErrorKind.NOT_SQUARE: 400,
    MatrixErrorKind.MALFORMED_INPUT: 400,
    MatrixErrorKind.NOT_INTEGER: 422,
}


# ---------------------------------------------------------------------------
# Upload extraction
# ---------------------------------------------------------------------------


async def extract_matrix(request: Request) -> Matrix:
    """Check the upload's presence, suffix, and size, then decode it into a ``Matrix``.

    A missing ``file`` field and a ``file`` field sent as plain text are both 400.
    """
    async with request.form() as form:
        upload = form.get(config.FILE_FIELD)
        if not isinstance(upload, UploadFile):
            raise HTTPException(status_code=400, detail=f'missing form file field "{config.FILE_FIELD}"')

        if Path(upload.filename or "").suffix != config.CSV_EXTENSION:
            raise HTTPException(status_code=400, detail=f'invalid file extension, should be "*{config.CSV_EXTENSION}"')

        # Read one byte past the limit so oversized uploads are detected without reading them fully
        content = await upload.read(config.MAX_UPLOAD_BYTES + 1)
        if len(content) > config.MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail=f"file exceeds {config.MAX_UPLOAD_BYTES} bytes")

    return decode_and_validate(content)


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------


app = FastAPI(title="Matrix Service")


@app.exception_handler(MatrixError)
async def matrix_error_handler(request: Request, exc: MatrixError):
    """Translate a core ``MatrixError`` into a JSON error response."""
    status = ERROR_STATUS[exc.kind]
    logger.warning("%s rejected (%s): %s", request.url.path, exc.kind.value, exc.message)
    return JSONResponse({"detail": exc.message, "kind": exc.kind.value}, status_code=status)


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    """Log boundary rejections (missing file, wrong suffix, oversize) before answering."""
    logger.warning("%s rejected (%d): %s", request.url.path, exc.status_code, exc.detail)
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/health")
async def health():
    """Liveness check."""
    return {"ok": True}


@app.post("/echo", response_class=PlainTextResponse)
async def echo(request: Request):
    """Return the uploaded matrix unchanged."""
    matrix = await extract_matrix(request)
    logger.info("Echo command called (%dx%d)", matrix.size, matrix.size)
    return render(matrix)


@app.post("/invert", response_class=PlainTextResponse)
async def invert(request: Request):
    """Return the transposed matrix (rows become columns)."""
    matrix = await extract_matrix(request)
    logger.info("Invert command called (%dx%d)", matrix.size, matrix.size)
    return render(transpose(matrix))


@app.post("/flatten", response_class=PlainTextResponse)
async def flatten_matrix(request: Request):
    """Return every cell on one line, row-major."""
    matrix = await extract_matrix(request)
    logger.info("Flatten command called (%dx%d)", matrix.size, matrix.size)
    return flatten(matrix)


@app.post("/sum", response_class=PlainTextResponse)
async def sum_matrix(request: Request):
    """Return the sum of all integer cells."""
    matrix = await extract_matrix(request)
    logger.info("Sum command called (%dx%d)", matrix.size, matrix.size)
    return f"{matrix_sum(matrix)}\n"


@app.post("/multiply", response_class=PlainTextResponse)
async def multiply_matrix(request: Request):
    """Return the product of all integer cells."""
    matrix = await extract_matrix(request)
    logger.info("Multiply command called (%dx%d)", matrix.size, matrix.size)
    return f"{multiply(matrix)}\n"


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main():
    """Start the web server via uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Server started on %s:%d", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
