"""Link session service.

Drives one LinkAttempt at a time through the linking workflow: provider
selection, initiation, opening the authorization surface, polling the
connection registry, and the terminal outcome.

The authorization surface is cross-origin and gives no reliable signal
when the user finishes or closes it. Success is detected only by polling
the registry; a closed window simply polls until the deadline.

Architecture:
    - Application service (orchestrates domain entity + protocols)
    - Never raises across its public methods; every call resolves to a
      Result and the current attempt
    - Stale responses (initiate or refresh results arriving after the
      attempt was cancelled or replaced) are discarded by attempt id

Tick ordering:
    The deadline is evaluated at the start of a tick, before the refresh.
    A match observed by that same tick still wins, so a tick that is both
    past the deadline and sees the connection ends COMPLETED.

Usage:
    session = LinkSession(
        catalog=catalog,
        registry=registry,
        backend=client,
        surface=BrowserAuthorizationSurface(logger=logger),
        poller=AsyncioPoller(logger=logger),
        clock=SystemClock(),
        logger=logger,
    )
    session.select(provider)
    if session.has_existing_connection:
        # warn: the new authorization replaces the existing connection
    await session.start()
"""

from datetime import timedelta
from functools import partial
from urllib.parse import urlsplit
from uuid import UUID

from gamelink.application.services.connection_registry import ConnectionRegistry
from gamelink.application.services.provider_catalog import ProviderCatalog
from gamelink.core.constants import (
    AUTHORIZATION_TIMEOUT,
    GENERIC_INITIATION_ERROR,
    POLL_INTERVAL_SECONDS,
)
from gamelink.core.enums import ErrorCode
from gamelink.core.result import Failure, Result, Success
from gamelink.domain.entities import LinkAttempt, Provider
from gamelink.domain.enums import LinkStatus
from gamelink.domain.errors import (
    BackendError,
    InitiationError,
    LinkAttemptError,
    LinkTimeoutError,
)
from gamelink.domain.protocols import (
    AuthorizationSurfaceProtocol,
    CancelToken,
    ClockProtocol,
    LinkingBackendProtocol,
    LoggerProtocol,
    PollerProtocol,
)


class LinkSession:
    """Owner of the single live link attempt.

    Args:
        catalog: Loaded provider catalog (selection must come from it).
        registry: Connection registry refreshed while polling.
        backend: Linking backend used for initiation.
        surface: Opens the authorization URL.
        poller: Schedules poll ticks.
        clock: Time source for deadlines.
        logger: Structured logger.
        poll_interval_seconds: Tick cadence.
        authorization_timeout: Polling window after the surface opens.
    """

    def __init__(
        self,
        *,
        catalog: ProviderCatalog,
        registry: ConnectionRegistry,
        backend: LinkingBackendProtocol,
        surface: AuthorizationSurfaceProtocol,
        poller: PollerProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        poll_interval_seconds: float = POLL_INTERVAL_SECONDS,
        authorization_timeout: timedelta = AUTHORIZATION_TIMEOUT,
    ) -> None:
        self._catalog = catalog
        self._registry = registry
        self._backend = backend
        self._surface = surface
        self._poller = poller
        self._clock = clock
        self._logger = logger
        self._poll_interval_seconds = poll_interval_seconds
        self._authorization_timeout = authorization_timeout
        self._attempt = LinkAttempt.idle()
        self._poll_token: CancelToken | None = None
        self._error: tuple[UUID, InitiationError | LinkTimeoutError] | None = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def attempt(self) -> LinkAttempt:
        """Current attempt (immutable value)."""
        return self._attempt

    @property
    def status(self) -> LinkStatus:
        """Status of the current attempt."""
        return self._attempt.status

    @property
    def has_existing_connection(self) -> bool:
        """Whether starting will replace an existing connection."""
        return self._attempt.has_existing_connection

    @property
    def status_message(self) -> str:
        """Human-readable message for the current state."""
        return self._attempt.status_message

    @property
    def last_error(self) -> InitiationError | LinkTimeoutError | None:
        """User-visible error that ended the current attempt, if any."""
        if self._error is None or self._error[0] != self._attempt.id:
            return None
        return self._error[1]

    @property
    def is_polling(self) -> bool:
        """Whether a poll job is scheduled."""
        return self._poll_token is not None

    @property
    def catalog(self) -> ProviderCatalog:
        return self._catalog

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    async def load(self) -> Result[tuple[Provider, ...], BackendError]:
        """Load the provider catalog and the current connection snapshot.

        A failed connection refresh is tolerated (replacement warnings are
        then based on the previous snapshot); a failed catalog load is
        returned.

        Returns:
            Success(tuple[Provider, ...]): Loaded catalog.
            Failure(BackendError): Catalog fetch failed.
        """
        providers = await self._catalog.list_providers()
        await self._registry.refresh_connections()
        return providers

    # -------------------------------------------------------------------------
    # User intents
    # -------------------------------------------------------------------------

    def select(self, provider: Provider) -> Result[LinkAttempt, str]:
        """Select a catalog provider.

        Allowed from IDLE, PROVIDER_SELECTED and CANCELLED. Records whether
        the registry already holds a connection for the provider so the
        caller can warn about replacement before start().

        Args:
            provider: Provider from the loaded catalog.

        Returns:
            Success(LinkAttempt): New PROVIDER_SELECTED attempt.
            Failure(error): Selection locked, close required, or the
                provider is not in the catalog. State unchanged.
        """
        has_existing = self._registry.has_active_connection(
            provider.id, canonical_id=provider.canonical_id
        )
        result = self._attempt.select(provider, has_existing_connection=has_existing)
        if isinstance(result, Failure):
            self._reject("select", result.error, provider_id=provider.id)
            return result

        if not self._catalog.contains(provider):
            self._reject("select", LinkAttemptError.UNKNOWN_PROVIDER, provider_id=provider.id)
            return Failure(error=LinkAttemptError.UNKNOWN_PROVIDER)

        self._attempt = result.value
        self._logger.info(
            "link_provider_selected",
            attempt_id=str(self._attempt.id),
            provider_id=provider.id,
            has_existing_connection=has_existing,
        )
        return result

    def select_by_id(self, provider_id: str) -> Result[LinkAttempt, str]:
        """Select a provider by catalog id.

        Returns:
            Success(LinkAttempt): New PROVIDER_SELECTED attempt.
            Failure(error): Unknown id, or select() refused.
        """
        lookup = self._catalog.get(provider_id)
        if isinstance(lookup, Failure):
            self._reject("select", LinkAttemptError.UNKNOWN_PROVIDER, provider_id=provider_id)
            return Failure(error=LinkAttemptError.UNKNOWN_PROVIDER)
        return self.select(lookup.value)

    def clear(self) -> Result[LinkAttempt, str]:
        """Drop the current selection (PROVIDER_SELECTED → IDLE)."""
        result = self._attempt.clear()
        if isinstance(result, Failure):
            self._reject("clear", result.error)
            return result

        self._attempt = result.value
        self._logger.debug("link_selection_cleared")
        return result

    async def start(self) -> Result[LinkAttempt, str]:
        """Initiate authorization for the selected provider.

        On a usable backend answer the authorization surface is opened and
        polling starts with `deadline = now + authorization_timeout`. On a
        refusal or transport error the attempt becomes FAILED; there is no
        automatic retry.

        Returns:
            Success(LinkAttempt): Attempt after start (POLLING or FAILED).
            Failure(error): Nothing selected, or the attempt was cancelled
                while the initiate request was in flight (response dropped).
        """
        began = self._attempt.begin_initiation()
        if isinstance(began, Failure):
            self._reject("start", began.error)
            return began

        attempt = began.value
        self._attempt = attempt
        provider = self._selected(attempt)
        log = self._logger.bind(attempt_id=str(attempt.id), provider_id=provider.id)
        log.info(
            "link_initiation_started",
            replacing_existing=attempt.has_existing_connection,
        )

        response = await self._backend.initiate_authorization(provider)

        if not self._is_current(attempt.id, LinkStatus.INITIATING):
            log.info(
                "link_initiation_response_discarded",
                current_status=self._attempt.status.value,
            )
            return Failure(error=LinkAttemptError.ATTEMPT_SUPERSEDED)

        if isinstance(response, Failure):
            return self._fail_initiation(provider, response.error.message, log)

        initiation = response.value
        if not initiation.is_usable or initiation.authorization_url is None:
            return self._fail_initiation(
                provider, initiation.error or GENERIC_INITIATION_ERROR, log
            )

        url = initiation.authorization_url
        awaiting = self._commit(self._attempt.initiation_succeeded(url))
        log.info("link_authorization_url_received", authorization_host=urlsplit(url).netloc)

        try:
            self._surface.open(url)
        except Exception as e:
            # URL stays on the attempt; the host can still offer it.
            log.error("authorization_surface_failed", error=e)

        polling = self._commit(
            awaiting.authorization_opened(
                opened_at=self._clock.now(), timeout=self._authorization_timeout
            )
        )
        self._poll_token = self._poller.schedule(
            self._poll_interval_seconds, partial(self._poll_tick, polling.id)
        )
        log.info(
            "link_polling_started",
            deadline=polling.deadline.isoformat() if polling.deadline else None,
            interval_seconds=self._poll_interval_seconds,
        )
        return Success(value=polling)

    def cancel(self) -> Result[LinkAttempt, str]:
        """Stop tracking the in-flight attempt.

        Stops polling immediately. The authorization surface is not touched;
        any response still in flight is discarded when it arrives.

        Returns:
            Success(LinkAttempt): CANCELLED attempt.
            Failure(error): Nothing in flight.
        """
        previous = self._attempt
        result = previous.cancel()
        if isinstance(result, Failure):
            self._reject("cancel", result.error)
            return result

        self._stop_polling()
        self._attempt = result.value
        self._logger.info(
            "link_attempt_cancelled",
            attempt_id=str(previous.id),
            previous_status=previous.status.value,
        )
        return result

    def close(self) -> Result[LinkAttempt, str]:
        """Acknowledge a terminal outcome and return to IDLE.

        Returns:
            Success(LinkAttempt): Fresh IDLE attempt.
            Failure(error): Attempt not terminal.
        """
        previous = self._attempt
        result = previous.close()
        if isinstance(result, Failure):
            self._reject("close", result.error)
            return result

        self._stop_polling()
        self._attempt = result.value
        self._logger.debug(
            "link_attempt_closed",
            attempt_id=str(previous.id),
            outcome=previous.status.value,
        )
        return result

    # -------------------------------------------------------------------------
    # Polling
    # -------------------------------------------------------------------------

    async def _poll_tick(self, attempt_id: UUID) -> None:
        if not self._is_current(attempt_id, LinkStatus.POLLING):
            return

        attempt = self._attempt
        provider = self._selected(attempt)
        deadline_reached = attempt.is_deadline_reached(self._clock.now())

        refreshed = await self._registry.refresh_connections()

        if not self._is_current(attempt_id, LinkStatus.POLLING):
            self._logger.debug(
                "link_poll_response_discarded",
                attempt_id=str(attempt_id),
                current_status=self._attempt.status.value,
            )
            return

        log = self._logger.bind(attempt_id=str(attempt_id), provider_id=provider.id)

        if isinstance(refreshed, Success) and self._registry.has_active_connection(
            provider.id, canonical_id=attempt.target_canonical_id
        ):
            self._finish(attempt.observe_match())
            log.info(
                "link_attempt_completed",
                replaced_existing=attempt.has_existing_connection,
            )
            return

        if isinstance(refreshed, Failure):
            log.debug("link_poll_refresh_failed", error=refreshed.error.message)

        if deadline_reached:
            timed_out = self._finish(attempt.deadline_elapsed())
            error = LinkTimeoutError(
                code=ErrorCode.LINK_TIMED_OUT,
                message=timed_out.status_message,
                provider_id=provider.id,
            )
            self._error = (timed_out.id, error)
            log.warning("link_attempt_timed_out", error_code=error.code.value)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _is_current(self, attempt_id: UUID, status: LinkStatus) -> bool:
        return self._attempt.id == attempt_id and self._attempt.status == status

    def _fail_initiation(self, provider: Provider, message: str, log: LoggerProtocol) -> Result[LinkAttempt, str]:
        error = InitiationError(
            code=ErrorCode.LINK_INITIATION_FAILED,
            message=message,
            provider_id=provider.id,
        )
        failed = self._commit(self._attempt.initiation_failed(error.message))
        self._error = (failed.id, error)
        log.warning(
            "link_initiation_failed", error_code=error.code.value, error=error.message
        )
        return Success(value=failed)

    def _finish(self, result: Result[LinkAttempt, str]) -> LinkAttempt:
        self._stop_polling()
        return self._commit(result)

    def _stop_polling(self) -> None:
        if self._poll_token is not None:
            self._poller.cancel(self._poll_token)
            self._poll_token = None

    def _commit(self, result: Result[LinkAttempt, str]) -> LinkAttempt:
        # Callers only commit transitions whose source state they just checked.
        if isinstance(result, Failure):
            raise RuntimeError(f"Illegal link transition: {result.error}")
        self._attempt = result.value
        return result.value

    def _reject(self, operation: str, reason: str, **context: str) -> None:
        self._logger.warning(
            "link_operation_rejected",
            operation=operation,
            status=self._attempt.status.value,
            reason=reason,
            **context,
        )

    @staticmethod
    def _selected(attempt: LinkAttempt) -> Provider:
        provider = attempt.selected_provider
        if provider is None:
            raise RuntimeError(LinkAttemptError.PROVIDER_REQUIRED)
        return provider
