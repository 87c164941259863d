"""Maps pipeline exceptions to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.extraction.exceptions import ExtractionError
from app.logging.logger import Log
from app.processor.exceptions import IntakeValidationError

EXTRACTION_STATUS_CODES: dict[str, int] = {
    "malformed-document": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "recognition-failure": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "exhausted-extraction": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "upstream-error": status.HTTP_502_BAD_GATEWAY,
    "upstream-unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
}

GENERIC_ERROR_MESSAGE = "Server error"


class RequestTimeoutError(Exception):
    """Raised when processing exceeds the configured request timeout."""


async def intake_validation_handler(
    request: Request, exc: IntakeValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "validation-error", "message": str(exc), "fields": exc.fields},
    )


async def extraction_error_handler(
    request: Request, exc: ExtractionError
) -> JSONResponse:
    return JSONResponse(
        status_code=EXTRACTION_STATUS_CODES.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content={"error": exc.kind, "message": str(exc)},
    )


async def timeout_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content={"error": "timeout", "message": str(exc)},
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal-error", "message": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntakeValidationError, intake_validation_handler)
    app.add_exception_handler(ExtractionError, extraction_error_handler)
    app.add_exception_handler(RequestTimeoutError, timeout_handler)
    app.add_exception_handler(Exception, internal_error_handler)
