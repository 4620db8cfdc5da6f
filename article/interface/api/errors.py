"""Central translation of errors into the response envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from article.domain.error import DomainError
from article.interface.api.schemas import ErrorResponse


def error_response(
    status_code: int, message: str, error: str | None = None
) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the status its class carries."""
    if exc.status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=exc.message,
            detail=exc.detail,
        )
        # Internal detail stays in the logs
        return error_response(exc.status_code, exc.message)

    logfire.info(
        "Request rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.message,
    )
    return error_response(exc.status_code, exc.message, exc.detail)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed bodies, paths and queries as 400."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        problems.append(f"{field}: {error['msg']}")
    return error_response(
        status.HTTP_400_BAD_REQUEST, "validation failed", "; ".join(problems)
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        if request.url.path.startswith("/api"):
            return error_response(exc.status_code, "API endpoint not found")
        return error_response(exc.status_code, "not found")
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log everything, reveal nothing."""
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
