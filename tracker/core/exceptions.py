"""RFC 7807 Problem Details error handling."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ProblemDetailError(Exception):
    """Raise for RFC 7807 problem+json responses.

    ``error`` is a short machine-readable code returned alongside the
    standard members (e.g. ``InvalidRoom``).
    """

    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        error_type: str | None = None,
        error: str | None = None,
    ):
        super().__init__(detail)
        self.status = status
        self.title = title
        self.detail = detail
        self.error_type = error_type or "about:blank"
        self.error = error or title.replace(" ", "")


class PayloadValidationError(ProblemDetailError):
    """Malformed body, visitor id, route or room. Nothing was written."""

    def __init__(self, detail: str, error: str = "InvalidPayload"):
        super().__init__(status=400, title="Bad Request", detail=detail, error=error)


class StoreError(ProblemDetailError):
    """Lookup or insert against the backing store failed. The caller may retry."""

    def __init__(self, detail: str = "Failed to record page view"):
        super().__init__(
            status=500, title="Internal Server Error", detail=detail, error="StoreError"
        )


async def problem_detail_handler(request: Request, exc: ProblemDetailError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status,
        content={
            "type": exc.error_type,
            "title": exc.title,
            "status": exc.status,
            "detail": exc.detail,
            "instance": str(request.url.path),
            "error": exc.error,
        },
        media_type="application/problem+json",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "type": "about:blank",
            "title": exc.detail if isinstance(exc.detail, str) else "Error",
            "status": exc.status_code,
            "detail": exc.detail,
            "instance": str(request.url.path),
            "error": "HTTPError",
        },
        headers=getattr(exc, "headers", None),
        media_type="application/problem+json",
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "type": "about:blank",
            "title": "Validation Error",
            "status": 422,
            "detail": exc.errors(),
            "instance": str(request.url.path),
            "error": "InvalidRequest",
        },
        media_type="application/problem+json",
    )


def internal_error_response(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "type": "about:blank",
            "title": "Internal Server Error",
            "status": 500,
            "detail": "Unexpected error",
            "instance": str(request.url.path),
            "error": "InternalServerError",
        },
        media_type="application/problem+json",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return internal_error_response(request)
