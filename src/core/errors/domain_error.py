"""DomainError: the failure half of a Result.

Errors are frozen dataclasses, not exceptions. A handler that rejects a
duplicate weapon name returns one wrapped in ApplicationError; nothing is
raised across the handler boundary.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error code plus message, with optional string details."""

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
