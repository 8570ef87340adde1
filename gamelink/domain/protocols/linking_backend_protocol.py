"""LinkingBackendProtocol - remote API used by the link workflow.

Architecture:
- Domain layer protocol (no httpx imports)
- Implemented by LinkingAPIClient in infrastructure/backend
- Every method returns a Result; transport problems become BackendError
  values, never exceptions

Usage:
    class ConnectionRegistry:
        def __init__(self, *, backend: LinkingBackendProtocol, ...):
            self._backend = backend

        async def refresh_connections(self):
            result = await self._backend.fetch_connections()
"""

from typing import Protocol

from gamelink.core.result import Result
from gamelink.domain.entities import Connection, Provider
from gamelink.domain.errors import BackendError
from gamelink.domain.value_objects import InitiationResponse


class LinkingBackendProtocol(Protocol):
    """Protocol for the linking backend."""

    async def fetch_providers(self) -> Result[list[Provider], BackendError]:
        """Fetch the catalog of linkable providers.

        Returns:
            Success(list[Provider]): Providers in backend order.
            Failure(BackendError): On transport or payload errors.
        """
        ...

    async def fetch_connections(self) -> Result[list[Connection], BackendError]:
        """Fetch the current user's provider connections.

        Returns:
            Success(list[Connection]): Connections for the authenticated user.
            Failure(BackendError): On transport or payload errors.
        """
        ...

    async def initiate_authorization(
        self, provider: Provider
    ) -> Result[InitiationResponse, BackendError]:
        """Ask the backend for a fresh authorization URL.

        Safe to call repeatedly; each call only generates a new URL.

        Args:
            provider: Provider to authorize.

        Returns:
            Success(InitiationResponse): Backend answer (may report failure).
            Failure(BackendError): On transport or payload errors.
        """
        ...
