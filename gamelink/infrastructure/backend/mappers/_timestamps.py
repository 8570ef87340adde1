"""Timestamp parsing shared by backend mappers."""

from datetime import UTC, datetime
from typing import Any


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a backend timestamp.

    Accepts ISO-8601 strings (a trailing "Z" included) and numeric epoch
    milliseconds, which some GraphQL DateTime scalars emit. Naive values
    are taken as UTC.

    Args:
        value: Raw timestamp value.

    Returns:
        datetime | None: Timezone-aware datetime, None when value is empty.

    Raises:
        ValueError: If a non-empty value cannot be parsed.
        TypeError: If the value has an unsupported type.
    """
    if value is None or value == "":
        return None

    if isinstance(value, bool):
        raise TypeError("boolean is not a timestamp")

    if isinstance(value, int | float):
        return datetime.fromtimestamp(value / 1000, tz=UTC)

    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdigit():
            return datetime.fromtimestamp(int(stripped) / 1000, tz=UTC)
        parsed = datetime.fromisoformat(stripped)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed

    raise TypeError(f"unsupported timestamp type: {type(value).__name__}")
