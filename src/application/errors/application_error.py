"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query handlers),
    typically wrapping domain errors with additional context.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="Repair amount cannot be negative",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Used by command and
    query handlers to provide structured error information to the presentation layer.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
        validation_errors: Every validation message when input failed more
            than one rule (empty otherwise)

    Examples:
        >>> # Command validation failure with several messages
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="Validation failed",
        ...     validation_errors=(
        ...         "Weapon name is required",
        ...         "Weapon hit points must be greater than 0",
        ...     ),
        ... )
        >>>
        >>> # Missing aggregate
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Weapon with ID '...' was not found",
        ...     details={"weapon_id": "0190a2c4-..."},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
    validation_errors: tuple[str, ...] = ()

    @property
    def is_validation_error(self) -> bool:
        return self.code in (
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            ApplicationErrorCode.QUERY_VALIDATION_FAILED,
        )

    @classmethod
    def validation(
        cls,
        message: str,
        validation_errors: tuple[str, ...] | list[str] = (),
        *,
        domain_error: DomainError | None = None,
    ) -> "ApplicationError":
        """Command validation failure.

        A single message is also reported as the only validation error.
        """
        errors = tuple(validation_errors) or (message,)
        return cls(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=message,
            domain_error=domain_error,
            validation_errors=errors,
        )

    @classmethod
    def invalid_query(cls, message: str) -> "ApplicationError":
        return cls(
            code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
            message=message,
            validation_errors=(message,),
        )

    @classmethod
    def not_found(cls, message: str, **details: str) -> "ApplicationError":
        return cls(
            code=ApplicationErrorCode.NOT_FOUND,
            message=message,
            details=details or None,
        )

    @classmethod
    def execution_failed(cls, message: str) -> "ApplicationError":
        return cls(code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED, message=message)

    @classmethod
    def query_failed(cls, message: str) -> "ApplicationError":
        return cls(code=ApplicationErrorCode.QUERY_FAILED, message=message)
