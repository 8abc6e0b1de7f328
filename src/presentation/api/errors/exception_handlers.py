"""Global exception handlers for FastAPI application.

Converts exceptions that escape the routers into RFC 9457 Problem Details
responses:

    RequestValidationError -> 400 (malformed request body)
    ValueError             -> 400
    LookupError / KeyError -> 404
    PermissionError        -> 401
    TimeoutError           -> 408
    Exception              -> 500 (details never leak to the client)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.api.errors.error_response_builder import ErrorResponseBuilder
from src.presentation.api.errors.problem_details import ErrorDetail, ProblemDetails
from src.presentation.api.middleware.trace_middleware import get_trace_id

# (exception type, status, problem slug, title, detail sent to the client)
_EXCEPTION_MAP: tuple[tuple[type[Exception], int, str, str, str | None], ...] = (
    (ValueError, status.HTTP_400_BAD_REQUEST, "bad-request", "Bad Request", None),
    (LookupError, status.HTTP_404_NOT_FOUND, "not-found", "Resource Not Found", None),
    (
        PermissionError,
        status.HTTP_401_UNAUTHORIZED,
        "unauthorized",
        "Authentication Required",
        "Unauthorized access",
    ),
    (
        TimeoutError,
        status.HTTP_408_REQUEST_TIMEOUT,
        "request-timeout",
        "Request Timeout",
        "Request timeout",
    ),
)


def _problem(
    request: Request,
    status_code: int,
    slug: str,
    title: str,
    detail: str,
    errors: list[ErrorDetail] | None = None,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=get_trace_id(),
    )
    return ErrorResponseBuilder.to_response(problem)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report body/path/query validation failures as 400 with one entry per field."""
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in err["loc"][1:]) or None,
            code=err["type"],
            message=err["msg"],
        )
        for err in exc.errors()
    ]
    return _problem(
        request,
        status.HTTP_400_BAD_REQUEST,
        "validation-error",
        "Validation Failed",
        "Request validation failed",
        errors,
    )


async def mapped_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map well-known exception types to 400/401/404/408."""
    for exc_type, status_code, slug, title, detail in _EXCEPTION_MAP:
        if isinstance(exc, exc_type):
            get_logger().warning(
                "request_failed",
                path=request.url.path,
                status_code=status_code,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return _problem(request, status_code, slug, title, detail or str(exc))
    return await generic_exception_handler(request, exc)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Prevents leaking stack traces or internal details to API consumers.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        path=request.url.path,
        method=request.method,
    )
    return _problem(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal-server-error",
        "Internal Server Error",
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    for exc_type, *_ in _EXCEPTION_MAP:
        app.add_exception_handler(exc_type, mapped_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
