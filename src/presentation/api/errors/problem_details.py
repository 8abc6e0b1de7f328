"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses. Served with the
application/problem+json media type.

Exports:
    ErrorDetail: Individual validation message
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ErrorDetail(BaseModel):
    """Individual validation error.

    Attributes:
        field: Request field the message refers to (None for rules that
            span the whole request)
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field=None,
        ...     code="command_validation_failed",
        ...     message="Weapon hit points must be greater than 0",
        ... )
    """

    field: str | None = Field(None, description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of validation errors
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Weapon with ID '...' was not found",
        ...     instance="/api/weapons/0190a2c4-...",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/command_validation_failed"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/weapons"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of validation errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
