"""LoggerProtocol: structured logging port.

Handlers log an event name plus keyword context, never formatted strings:

    logger.info("weapon_damaged", weapon_id=str(weapon_id), damage_amount=10)

Passwords and tokens are never passed as context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger with the five standard levels and context binding."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation.

        Args:
            message: Event name, e.g. "weapon_repair_failed".
            error: Exception that caused it; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure that stops the service (e.g. no database at startup)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger that adds context to every call.

        The receiver is left unchanged.

        Example:
            handler_logger = logger.bind(handler="RepairWeaponHandler")
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as bind()."""
        ...
