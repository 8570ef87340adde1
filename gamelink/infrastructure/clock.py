"""System clock adapter."""

from datetime import UTC, datetime


class SystemClock:
    """ClockProtocol implementation backed by the system clock."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(UTC)
