"""Link attempt lifecycle states.

State Machine:
    IDLE → PROVIDER_SELECTED → INITIATING → AWAITING_AUTHORIZATION → POLLING

    POLLING → COMPLETED | TIMED_OUT | CANCELLED
    INITIATING → FAILED | CANCELLED
    AWAITING_AUTHORIZATION → CANCELLED
    PROVIDER_SELECTED → IDLE (clear)
    Terminal → IDLE (close)

Usage:
    from gamelink.domain.enums import LinkStatus

    if session.status in LinkStatus.terminal_states():
        # Show outcome until the user acknowledges it
"""

from enum import Enum


class LinkStatus(str, Enum):
    """Link attempt lifecycle states.

    String Enum:
        Inherits from str for easy serialization.
        Values are lowercase snake_case.
    """

    IDLE = "idle"
    """No provider selected."""

    PROVIDER_SELECTED = "provider_selected"
    """Provider chosen, nothing sent to the backend yet."""

    INITIATING = "initiating"
    """Initiate request in flight."""

    AWAITING_AUTHORIZATION = "awaiting_authorization"
    """Authorization URL received, surface about to open."""

    POLLING = "polling"
    """Authorization surface open; registry refreshed on a fixed cadence."""

    COMPLETED = "completed"
    """Target connection observed in the registry."""

    TIMED_OUT = "timed_out"
    """Deadline elapsed without observing the connection."""

    CANCELLED = "cancelled"
    """User stopped tracking the attempt. Not an error."""

    FAILED = "failed"
    """Initiation failed."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def terminal_states(cls) -> list["LinkStatus"]:
        """Get terminal states (attempt immutable, only close() leaves).

        Returns:
            list[LinkStatus]: Terminal states.
        """
        return [cls.COMPLETED, cls.TIMED_OUT, cls.CANCELLED, cls.FAILED]

    @classmethod
    def in_flight_states(cls) -> list["LinkStatus"]:
        """Get states where an attempt is actively being tracked.

        Returns:
            list[LinkStatus]: States that cancel() applies to.
        """
        return [cls.INITIATING, cls.AWAITING_AUTHORIZATION, cls.POLLING]

    @classmethod
    def selectable_states(cls) -> list["LinkStatus"]:
        """Get states from which a provider may be (re)selected.

        Returns:
            list[LinkStatus]: States accepting select().
        """
        return [cls.IDLE, cls.PROVIDER_SELECTED, cls.CANCELLED]

    @property
    def is_terminal(self) -> bool:
        """Check if this status is terminal."""
        return self in LinkStatus.terminal_states()
