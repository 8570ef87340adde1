"""Connection registry service.

Keeps the latest snapshot of the user's connections and answers "is this
provider already linked". The snapshot is refreshed in place and handed
out by value (a tuple of frozen Connection objects), so readers never see
it change under them.

Refresh failures are stale-but-available: the previous snapshot stays.
"""

from dataclasses import dataclass

from gamelink.core.enums import ErrorCode
from gamelink.core.result import Failure, Result, Success
from gamelink.domain.entities import Connection, Provider
from gamelink.domain.errors import PollTransientError
from gamelink.domain.protocols import LinkingBackendProtocol, LoggerProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class ConnectionView:
    """A connection paired with its catalog provider, for display.

    Attributes:
        connection: The connection record.
        provider: Catalog provider, None when no catalog entry matches.
        display_name: Provider name, or the raw provider reference.
    """

    connection: Connection
    provider: Provider | None
    display_name: str


class ConnectionRegistry:
    """Snapshot of the user's provider connections.

    Args:
        backend: Linking backend.
        logger: Structured logger.
    """

    def __init__(self, *, backend: LinkingBackendProtocol, logger: LoggerProtocol) -> None:
        self._backend = backend
        self._logger = logger
        self._snapshot: tuple[Connection, ...] = ()

    @property
    def snapshot(self) -> tuple[Connection, ...]:
        """Current snapshot (immutable)."""
        return self._snapshot

    @property
    def active_count(self) -> int:
        """Number of active connections in the snapshot."""
        return sum(1 for connection in self._snapshot if connection.is_active)

    async def refresh_connections(
        self,
    ) -> Result[tuple[Connection, ...], PollTransientError]:
        """Refetch connections from the backend.

        Returns:
            Success(tuple[Connection, ...]): New snapshot.
            Failure(PollTransientError): Fetch failed; previous snapshot kept.
        """
        result = await self._backend.fetch_connections()
        if isinstance(result, Failure):
            self._logger.warning(
                "connection_refresh_failed",
                error_code=result.error.code.value,
                error=result.error.message,
                kept=len(self._snapshot),
            )
            return Failure(
                error=PollTransientError(
                    code=ErrorCode.LINK_REFRESH_FAILED,
                    message=result.error.message,
                    details={"operation": result.error.operation},
                )
            )

        self._snapshot = tuple(result.value)
        self._logger.debug("connection_refresh_succeeded", count=len(self._snapshot))
        return Success(value=self._snapshot)

    def has_active_connection(
        self, provider_id: str, *, canonical_id: str | None = None
    ) -> bool:
        """Check whether the snapshot holds an active connection for a provider.

        Matching goes by canonical id first, then falls back to the provider
        slug, since backend records reference either form.

        Args:
            provider_id: Provider id (slug).
            canonical_id: Canonical identifier of the target, when known.

        Returns:
            bool: True if an active connection matches.
        """
        active = [connection for connection in self._snapshot if connection.is_active]

        if canonical_id is not None and any(
            connection.matches_canonical(canonical_id) for connection in active
        ):
            return True

        return any(connection.matches_provider(provider_id) for connection in active)

    def describe(self, providers: tuple[Provider, ...] | list[Provider]) -> list[ConnectionView]:
        """Pair active connections with catalog providers for display.

        Catalog entries are matched by canonical id first, then by slug.

        Args:
            providers: Catalog providers.

        Returns:
            list[ConnectionView]: One view per active connection, snapshot order.
        """
        by_canonical = {p.canonical_id: p for p in providers if p.canonical_id}
        by_slug: dict[str, Provider] = {}
        for provider in providers:
            by_slug.setdefault(provider.id, provider)
            by_slug.setdefault(provider.route_slug, provider)

        views = []
        for connection in self._snapshot:
            if not connection.is_active:
                continue
            provider = (
                by_canonical.get(connection.canonical_account_id or "")
                or by_canonical.get(connection.provider_id)
                or by_slug.get(connection.provider_id)
            )
            display_name = (
                provider.display_name
                if provider is not None
                else connection.provider_display_name or connection.provider_id
            )
            views.append(
                ConnectionView(
                    connection=connection, provider=provider, display_name=display_name
                )
            )
        return views
