"""Console logging adapter.

Writes structured events to stdout through structlog, rendered for a
terminal or as JSON (testing/CI). Any string value that parses as an
http(s) URL has its query and fragment stripped before rendering, so
authorization state or codes cannot reach the log even when a caller
passes a whole URL.

Satisfies LoggerProtocol structurally (PEP 544), without inheriting it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any
from urllib.parse import urlsplit, urlunsplit

import structlog

LOGGER_NAME = "gamelink"


def redact_url_queries(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor dropping query strings and fragments from URLs."""
    for key, value in event_dict.items():
        if key == "event" or not isinstance(value, str):
            continue
        if not value.startswith(("http://", "https://")):
            continue
        parts = urlsplit(value)
        if parts.query or parts.fragment:
            event_dict[key] = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return event_dict


def _resolve_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger for the linking client.

    Args:
        use_json (bool): JSON lines when True, colored console output otherwise.
        level (str): Minimum level name. Unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                redact_url_queries,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger(LOGGER_NAME)

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; an exception is flattened into error_type/error_message."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter carrying context on every event."""
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
