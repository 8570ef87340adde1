"""LoggerProtocol definition for structured logging.

Standardizes structured logging across gamelink while staying
backend-agnostic. Implementations MUST emit key-value context and MUST NOT
log secrets.

Security:
    - NEVER log bearer tokens
    - Log authorization URLs by host only (query strings carry OAuth state)

Usage:
    from gamelink.core.container import get_logger

    logger = get_logger()
    attempt_logger = logger.bind(attempt_id=str(attempt.id))
    attempt_logger.info("link_attempt_started", provider_id=provider.id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: event name + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The receiving logger remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
