"""Map domain exceptions onto HTTP responses.

Protean's handlers cover domain validation (400) and missing objects (404).
Malformed request bodies are a 400 as well, so every client error carries an
``error`` key. A stale aggregate version is a 409. Storage failures surface
as a 500 with a generic message; the details go to the log.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import DatabaseError, ExpectedVersionError, TransactionError
from protean.integrations.fastapi import register_exception_handlers as register_protean_handlers

from guideresto.utils.logging import get_logger

logger = get_logger(__name__)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": jsonable_encoder(exc.errors())})


async def _version_conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("Concurrent modification", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=409, content={"error": "The restaurant was modified concurrently, retry"})


async def _storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Storage failure", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": "Internal storage error"})


def register_exception_handlers(app: FastAPI) -> None:
    register_protean_handlers(app)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ExpectedVersionError, _version_conflict_handler)
    app.add_exception_handler(TransactionError, _storage_error_handler)
    app.add_exception_handler(DatabaseError, _storage_error_handler)
