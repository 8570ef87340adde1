"""Link attempt domain entity.

One linking workflow from provider selection to terminal outcome, held as
a single immutable value. Every transition is a pure method returning a
new LinkAttempt, so flags such as "connecting" and "completed" can never
disagree.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Immutable (frozen dataclass); transitions return new instances
    - Uses Result types (railway-oriented programming)
    - Invariants validated at construction

Usage:
    from gamelink.domain.entities import LinkAttempt

    attempt = LinkAttempt.idle()
    match attempt.select(provider, has_existing_connection=False):
        case Success(value=selected):
            assert selected.status == LinkStatus.PROVIDER_SELECTED
        case Failure(error=error):
            # error is a LinkAttemptError constant
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from gamelink.core.result import Failure, Result, Success
from gamelink.domain.entities.provider import Provider
from gamelink.domain.enums import LinkStatus
from gamelink.domain.errors import LinkAttemptError

_STATUS_MESSAGES: dict[LinkStatus, str] = {
    LinkStatus.IDLE: "",
    LinkStatus.PROVIDER_SELECTED: "",
    LinkStatus.INITIATING: "Initializing connection...",
    LinkStatus.AWAITING_AUTHORIZATION: "Opening authorization page...",
    LinkStatus.POLLING: "Waiting for authorization in the new tab...",
    LinkStatus.COMPLETED: "Authorization complete! Click Close to finish.",
    LinkStatus.TIMED_OUT: "Authorization timed out. Please try again.",
    LinkStatus.CANCELLED: "Authentication cancelled by user",
}

_REQUIRES_PROVIDER = frozenset(
    {
        LinkStatus.PROVIDER_SELECTED,
        LinkStatus.INITIATING,
        LinkStatus.AWAITING_AUTHORIZATION,
        LinkStatus.POLLING,
        LinkStatus.COMPLETED,
        LinkStatus.TIMED_OUT,
        LinkStatus.FAILED,
    }
)

_CARRIES_URL = frozenset({LinkStatus.AWAITING_AUTHORIZATION, LinkStatus.POLLING})


@dataclass(frozen=True, kw_only=True)
class LinkAttempt:
    """State of one provider linking attempt.

    State Machine:
        IDLE --select--> PROVIDER_SELECTED --begin_initiation--> INITIATING
        INITIATING --initiation_succeeded--> AWAITING_AUTHORIZATION
        INITIATING --initiation_failed--> FAILED
        AWAITING_AUTHORIZATION --authorization_opened--> POLLING
        POLLING --observe_match--> COMPLETED
        POLLING --deadline_elapsed--> TIMED_OUT
        INITIATING/AWAITING_AUTHORIZATION/POLLING --cancel--> CANCELLED
        terminal --close--> IDLE

    Terminal attempts are never transitioned again except by close(),
    which yields a brand new IDLE attempt. select() from CANCELLED also
    yields a new attempt (fresh id); the cancelled value is left as is.

    Attributes:
        id: Attempt identifier (UUIDv7). Responses for another id are stale.
        status: Current lifecycle state.
        selected_provider: Provider being linked.
        target_canonical_id: Canonical id expected to appear as a
            connection, when known before authorization.
        has_existing_connection: A connection for the provider already
            existed at selection time; starting will replace it.
        authorization_url: Opaque URL from the backend. Never parsed.
        deadline: Absolute time after which polling gives up.
        error_message: Failure reason (FAILED only).
    """

    id: UUID = field(default_factory=uuid7)
    status: LinkStatus = LinkStatus.IDLE
    selected_provider: Provider | None = None
    target_canonical_id: str | None = None
    has_existing_connection: bool = False
    authorization_url: str | None = None
    deadline: datetime | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        """Validate state invariants.

        Raises:
            ValueError: If a field is inconsistent with the status. These are
                programming errors, not business failures.
        """
        if self.status in _REQUIRES_PROVIDER and self.selected_provider is None:
            raise ValueError(LinkAttemptError.PROVIDER_REQUIRED)

        if (
            self.status in (LinkStatus.IDLE, LinkStatus.CANCELLED)
            and self.selected_provider is not None
        ):
            raise ValueError(LinkAttemptError.PROVIDER_NOT_ALLOWED)

        if (self.authorization_url is not None) != (self.status in _CARRIES_URL):
            raise ValueError(LinkAttemptError.URL_ONLY_WHEN_AUTHORIZING)

        if (self.deadline is not None) != (self.status == LinkStatus.POLLING):
            raise ValueError(LinkAttemptError.DEADLINE_ONLY_WHEN_POLLING)

        if self.error_message is not None and self.status != LinkStatus.FAILED:
            raise ValueError(LinkAttemptError.ERROR_ONLY_WHEN_FAILED)

    @classmethod
    def idle(cls) -> "LinkAttempt":
        """Create a fresh IDLE attempt."""
        return cls()

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        """Check if the attempt reached a terminal state."""
        return self.status.is_terminal

    @property
    def is_in_flight(self) -> bool:
        """Check if the attempt is initiating, authorizing or polling."""
        return self.status in LinkStatus.in_flight_states()

    @property
    def status_message(self) -> str:
        """Human-readable message describing the current state."""
        if self.status == LinkStatus.FAILED:
            return self.error_message or ""
        return _STATUS_MESSAGES[self.status]

    def is_deadline_reached(self, now: datetime) -> bool:
        """Check if polling has run out of time.

        Args:
            now: Current time from the injected clock.

        Returns:
            bool: True if polling and `now >= deadline`.
        """
        return self.deadline is not None and now >= self.deadline

    # -------------------------------------------------------------------------
    # Transitions (Return Result, never mutate)
    # -------------------------------------------------------------------------

    def select(
        self, provider: Provider, *, has_existing_connection: bool
    ) -> Result["LinkAttempt", str]:
        """Select a provider, producing a new attempt.

        Args:
            provider: Catalog provider to link.
            has_existing_connection: Whether the registry already holds an
                active connection for this provider.

        Returns:
            Success(LinkAttempt): New PROVIDER_SELECTED attempt (fresh id).
            Failure(error): Attempt in flight, or finished and not closed.
        """
        if self.is_in_flight:
            return Failure(error=LinkAttemptError.SELECTION_LOCKED)

        if self.status not in LinkStatus.selectable_states():
            return Failure(error=LinkAttemptError.CLOSE_REQUIRED)

        return Success(
            value=LinkAttempt(
                status=LinkStatus.PROVIDER_SELECTED,
                selected_provider=provider,
                target_canonical_id=provider.canonical_id,
                has_existing_connection=has_existing_connection,
            )
        )

    def clear(self) -> Result["LinkAttempt", str]:
        """Drop the current selection.

        Returns:
            Success(LinkAttempt): Fresh IDLE attempt.
            Failure(error): Not PROVIDER_SELECTED.
        """
        if self.status != LinkStatus.PROVIDER_SELECTED:
            return Failure(error=LinkAttemptError.CANNOT_CLEAR)
        return Success(value=LinkAttempt.idle())

    def begin_initiation(self) -> Result["LinkAttempt", str]:
        """Move to INITIATING before the initiate request is sent."""
        if self.status != LinkStatus.PROVIDER_SELECTED:
            return Failure(error=LinkAttemptError.CANNOT_START)
        return Success(value=replace(self, status=LinkStatus.INITIATING))

    def initiation_succeeded(self, authorization_url: str) -> Result["LinkAttempt", str]:
        """Store the authorization URL returned by the backend.

        Args:
            authorization_url: Opaque URL to open.

        Returns:
            Success(LinkAttempt): AWAITING_AUTHORIZATION attempt.
            Failure(error): Not INITIATING.
        """
        if self.status != LinkStatus.INITIATING:
            return Failure(error=LinkAttemptError.CANNOT_COMPLETE_INITIATION)
        return Success(
            value=replace(
                self,
                status=LinkStatus.AWAITING_AUTHORIZATION,
                authorization_url=authorization_url,
            )
        )

    def initiation_failed(self, message: str) -> Result["LinkAttempt", str]:
        """Record an initiation failure.

        Args:
            message: User-facing failure reason.

        Returns:
            Success(LinkAttempt): FAILED attempt.
            Failure(error): Not INITIATING.
        """
        if self.status != LinkStatus.INITIATING:
            return Failure(error=LinkAttemptError.CANNOT_COMPLETE_INITIATION)
        return Success(
            value=replace(self, status=LinkStatus.FAILED, error_message=message)
        )

    def authorization_opened(
        self, *, opened_at: datetime, timeout: timedelta
    ) -> Result["LinkAttempt", str]:
        """Start polling once the authorization surface has been opened.

        The deadline is measured from the moment the surface opens, not from
        start().

        Args:
            opened_at: Time the surface was opened.
            timeout: Polling window.

        Returns:
            Success(LinkAttempt): POLLING attempt with deadline.
            Failure(error): Not AWAITING_AUTHORIZATION.
        """
        if self.status != LinkStatus.AWAITING_AUTHORIZATION:
            return Failure(error=LinkAttemptError.CANNOT_OPEN_AUTHORIZATION)
        return Success(
            value=replace(
                self, status=LinkStatus.POLLING, deadline=opened_at + timeout
            )
        )

    def observe_match(self) -> Result["LinkAttempt", str]:
        """Mark the target connection as observed."""
        if self.status != LinkStatus.POLLING:
            return Failure(error=LinkAttemptError.CANNOT_COMPLETE)
        return Success(
            value=replace(
                self,
                status=LinkStatus.COMPLETED,
                authorization_url=None,
                deadline=None,
            )
        )

    def deadline_elapsed(self) -> Result["LinkAttempt", str]:
        """Give up polling after the deadline."""
        if self.status != LinkStatus.POLLING:
            return Failure(error=LinkAttemptError.CANNOT_TIME_OUT)
        return Success(
            value=replace(
                self,
                status=LinkStatus.TIMED_OUT,
                authorization_url=None,
                deadline=None,
            )
        )

    def cancel(self) -> Result["LinkAttempt", str]:
        """Stop tracking an in-flight attempt.

        Clears provider, URL and deadline so a fresh select() can follow.
        The external authorization surface is left alone.

        Returns:
            Success(LinkAttempt): CANCELLED attempt (same id).
            Failure(error): Not in flight.
        """
        if not self.is_in_flight:
            return Failure(error=LinkAttemptError.CANNOT_CANCEL)
        return Success(
            value=replace(
                self,
                status=LinkStatus.CANCELLED,
                selected_provider=None,
                target_canonical_id=None,
                has_existing_connection=False,
                authorization_url=None,
                deadline=None,
            )
        )

    def close(self) -> Result["LinkAttempt", str]:
        """Acknowledge a terminal outcome.

        Returns:
            Success(LinkAttempt): Fresh IDLE attempt.
            Failure(error): Attempt not terminal.
        """
        if not self.is_terminal:
            return Failure(error=LinkAttemptError.CANNOT_CLOSE)
        return Success(value=LinkAttempt.idle())
