"""Provider catalog service.

Holds the linkable providers fetched once per session and answers lookup
and search queries against them.
"""

from gamelink.core.enums import ErrorCode
from gamelink.core.errors import NotFoundError
from gamelink.core.result import Failure, Result, Success
from gamelink.domain.entities import Provider
from gamelink.domain.errors import BackendError
from gamelink.domain.protocols import LinkingBackendProtocol, LoggerProtocol
from gamelink.domain.search import search_providers


class ProviderCatalog:
    """Read-only catalog of linkable providers.

    A failed load keeps whatever was loaded before.

    Args:
        backend: Linking backend.
        logger: Structured logger.

    Example:
        >>> catalog = ProviderCatalog(backend=client, logger=logger)
        >>> await catalog.list_providers()
        >>> catalog.search("destiny")
    """

    def __init__(self, *, backend: LinkingBackendProtocol, logger: LoggerProtocol) -> None:
        self._backend = backend
        self._logger = logger
        self._providers: tuple[Provider, ...] = ()

    @property
    def providers(self) -> tuple[Provider, ...]:
        """Providers currently loaded, in backend order."""
        return self._providers

    async def list_providers(self) -> Result[tuple[Provider, ...], BackendError]:
        """Fetch the catalog from the backend.

        Returns:
            Success(tuple[Provider, ...]): Loaded providers.
            Failure(BackendError): Fetch failed; previous catalog kept.
        """
        result = await self._backend.fetch_providers()
        if isinstance(result, Failure):
            self._logger.warning(
                "provider_catalog_load_failed",
                error_code=result.error.code.value,
                error=result.error.message,
                kept=len(self._providers),
            )
            return result

        self._providers = tuple(result.value)
        self._logger.info("provider_catalog_loaded", count=len(self._providers))
        return Success(value=self._providers)

    def get(self, provider_id: str) -> Result[Provider, NotFoundError]:
        """Look up a provider by id.

        Args:
            provider_id: Provider id (slug).

        Returns:
            Success(Provider): Matching provider.
            Failure(NotFoundError): Not in the loaded catalog.
        """
        for provider in self._providers:
            if provider.id == provider_id:
                return Success(value=provider)
        return Failure(
            error=NotFoundError(
                code=ErrorCode.PROVIDER_NOT_FOUND,
                message=f"Provider '{provider_id}' is not in the catalog",
                resource_type="Provider",
                resource_id=provider_id,
            )
        )

    def contains(self, provider: Provider) -> bool:
        """Check that this exact provider is part of the loaded catalog."""
        return provider in self._providers

    def search(self, query: str) -> list[Provider]:
        """Filter the catalog by name, slug or vendor."""
        return search_providers(self._providers, query)
