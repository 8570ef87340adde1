"""Link workflow error taxonomy.

Only InitiationError and LinkTimeoutError are user-visible. A
PollTransientError is contained inside the polling loop: it is logged and
the next tick proceeds on schedule. Cancellation is a terminal state, not
an error, so it has no error type.
"""

from dataclasses import dataclass

from gamelink.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InitiationError(DomainError):
    """Initiate call failed or returned no authorization URL.

    Attributes:
        provider_id: Provider the attempt targeted.
    """

    provider_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class PollTransientError(DomainError):
    """A single connection registry refresh failed.

    Attributes:
        is_transient: Always True for refresh failures surfaced to polling.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class LinkTimeoutError(DomainError):
    """Deadline elapsed without the target connection appearing.

    Attributes:
        provider_id: Provider the attempt targeted.
    """

    provider_id: str
