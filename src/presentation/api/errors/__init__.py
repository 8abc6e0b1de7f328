"""RFC 9457 error responses.

Exports:
    ErrorDetail, ProblemDetails: Response schemas
    ErrorResponseBuilder: ApplicationError -> problem response
    register_exception_handlers: Global exception handlers
"""

from src.presentation.api.errors.error_response_builder import ErrorResponseBuilder
from src.presentation.api.errors.exception_handlers import register_exception_handlers
from src.presentation.api.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
