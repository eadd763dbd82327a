from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from iss_flyover.errors import (
    HTTPStatusError,
    LookupStepError,
    NetworkError,
    ParseError,
    ServiceReportedError,
)
from iss_flyover.logger import logger
from iss_flyover.models.response_models import ErrorResponse

ERROR_CODES: dict[type[LookupStepError], str] = {
    NetworkError: "upstream_unreachable",
    HTTPStatusError: "upstream_status",
    ParseError: "upstream_bad_payload",
    ServiceReportedError: "upstream_rejected",
}


def _build_lookup_error_payload(exc: LookupStepError) -> dict[str, Any]:
    """Normalize a failed lookup into a consistent error payload.

    - `code`: short machine-readable error code per error type.
    - `message`: the error text, which names the failing step.
    - `stage`: which lookup of the chain failed.
    - `upstream_status_code`: the provider's HTTP status, for status errors only.
    """
    code = next(
        (code for error_cls, code in ERROR_CODES.items() if isinstance(exc, error_cls)),
        "upstream_error",
    )
    payload = ErrorResponse(
        code=code,
        message=str(exc),
        stage=exc.stage,
        upstream_status_code=exc.status_code if isinstance(exc, HTTPStatusError) else None,
    )
    return payload.model_dump(mode="json")


async def lookup_step_exception_handler(request: Request, exc: LookupStepError) -> JSONResponse:
    """Map a failed upstream lookup to a 502 Bad Gateway response."""
    stage = exc.stage.value if exc.stage else None
    logger.error(
        "Upstream lookup failed while handling request "
        f"path={request.url.path} method={request.method} stage={stage} error={exc!r}"
    )
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=_build_lookup_error_payload(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        f"Unhandled exception while processing request: {repr(exc)} path={request.url.path} method={request.method}"
    )
    content: dict[str, Any] = {
        "code": "internal_error",
        "message": "An unexpected error occurred while processing the request.",
    }
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )
