"""ClockProtocol - source of the current time.

The link workflow reads time only through this protocol so tests can
advance a fake clock tick by tick.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Provides timezone-aware current time."""

    def now(self) -> datetime:
        """Return the current time (timezone-aware, UTC).

        Returns:
            datetime: Current time.
        """
        ...
