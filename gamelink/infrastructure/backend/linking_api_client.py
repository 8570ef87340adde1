"""Linking backend API client.

Implements LinkingBackendProtocol over the application backend:
- Catalog and connection registry through GraphQL queries
- Authorization initiation through the REST initiate endpoint

Architecture:
    - Infrastructure adapter (httpx via BaseAPIClient)
    - Returns Result types; invalid list entries are skipped and logged
"""

from typing import Any
from urllib.parse import quote

from gamelink.core.constants import BACKEND_TIMEOUT_DEFAULT, BEARER_PREFIX
from gamelink.core.enums import ErrorCode
from gamelink.core.result import Failure, Result, Success
from gamelink.domain.entities import Connection, Provider
from gamelink.domain.errors import (
    BackendAuthenticationError,
    BackendError,
    BackendInvalidResponseError,
)
from gamelink.domain.value_objects import InitiationResponse
from gamelink.infrastructure.backend.base_api_client import BaseAPIClient
from gamelink.infrastructure.backend.mappers import (
    ConnectionMapper,
    InitiationMapper,
    ProviderMapper,
)
from gamelink.infrastructure.backend.queries import (
    SUPPORTED_GAMES_QUERY,
    USER_PROVIDER_CONNECTIONS_QUERY,
)

_GRAPHQL_AUTH_CODES = frozenset({"UNAUTHENTICATED", "FORBIDDEN"})

# Initiate answers these statuses with a JSON body explaining the refusal.
_INITIATE_REFUSAL_STATUSES = frozenset({400, 404, 409, 422})


class LinkingAPIClient(BaseAPIClient):
    """HTTP client for the linking backend.

    Args:
        base_url: Backend base URL.
        auth_token: Bearer token of the signed-in user (never logged).
        graphql_path: GraphQL endpoint path.
        initiate_path_template: Initiate path with a `{slug}` placeholder.
        timeout: HTTP timeout in seconds.

    Example:
        >>> client = LinkingAPIClient(base_url="http://localhost:4000", auth_token=token)
        >>> result = await client.fetch_connections()
    """

    def __init__(
        self,
        *,
        base_url: str,
        auth_token: str | None = None,
        graphql_path: str = "/graphql/",
        initiate_path_template: str = "/api/auth/gaming/{slug}/initiate",
        timeout: float = BACKEND_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(base_url=base_url, service_name="linking", timeout=timeout)
        self._auth_token = auth_token
        self._graphql_path = graphql_path
        self._initiate_path_template = initiate_path_template
        self._provider_mapper = ProviderMapper()
        self._connection_mapper = ConnectionMapper()
        self._initiation_mapper = InitiationMapper()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._auth_token:
            headers["Authorization"] = f"{BEARER_PREFIX}{self._auth_token}"
        return headers

    async def _query_list(
        self, *, query: str, field: str, operation: str
    ) -> Result[list[dict[str, Any]], BackendError]:
        """Run a GraphQL query whose `data[field]` is a list.

        Args:
            query: GraphQL document.
            field: Top-level field to extract.
            operation: Operation name for logging.

        Returns:
            Success(list[dict]): Raw entries (non-dict entries dropped).
            Failure(BackendError): Transport, GraphQL or shape errors.
        """
        result = await self._execute_and_parse_object(
            method="POST",
            path=self._graphql_path,
            headers=self._headers(),
            json_data={"query": query},
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        payload = result.value
        errors = payload.get("errors")
        if errors:
            return Failure(error=self._graphql_error(errors, operation))

        data = payload.get("data") or {}
        entries = data.get(field) if isinstance(data, dict) else None
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            self._logger.warning(
                "linking_api_unexpected_format",
                operation=operation,
                field=field,
                data_type=type(entries).__name__,
            )
            return Failure(
                error=BackendInvalidResponseError(
                    code=ErrorCode.BACKEND_INVALID_RESPONSE,
                    message=f"Expected a list for '{field}'",
                    operation=operation,
                )
            )

        return Success(value=[entry for entry in entries if isinstance(entry, dict)])

    def _graphql_error(self, errors: Any, operation: str) -> BackendError:
        first = errors[0] if isinstance(errors, list) and errors else {}
        if not isinstance(first, dict):
            first = {}
        message = str(first.get("message") or "GraphQL request failed")
        extensions = first.get("extensions") or {}
        code = extensions.get("code") if isinstance(extensions, dict) else None

        self._logger.warning(
            "linking_api_graphql_error",
            operation=operation,
            graphql_code=code,
            error=message,
        )

        if code in _GRAPHQL_AUTH_CODES:
            return BackendAuthenticationError(
                code=ErrorCode.BACKEND_AUTHENTICATION_FAILED,
                message=message,
                operation=operation,
            )
        return BackendInvalidResponseError(
            code=ErrorCode.BACKEND_INVALID_RESPONSE,
            message=message,
            operation=operation,
        )

    async def fetch_providers(self) -> Result[list[Provider], BackendError]:
        """Fetch the provider catalog.

        Returns:
            Success(list[Provider]): Valid providers in backend order.
            Failure(BackendError): On any error.
        """
        result = await self._query_list(
            query=SUPPORTED_GAMES_QUERY,
            field="supportedGames",
            operation="fetch_providers",
        )
        if isinstance(result, Failure):
            return result

        providers = [
            provider
            for entry in result.value
            if (provider := self._provider_mapper.map_provider(entry)) is not None
        ]
        return Success(value=providers)

    async def fetch_connections(self) -> Result[list[Connection], BackendError]:
        """Fetch the signed-in user's provider connections.

        Returns:
            Success(list[Connection]): Valid connections in backend order.
            Failure(BackendError): On any error.
        """
        result = await self._query_list(
            query=USER_PROVIDER_CONNECTIONS_QUERY,
            field="userProviderConnections",
            operation="fetch_connections",
        )
        if isinstance(result, Failure):
            return result

        connections = [
            connection
            for entry in result.value
            if (connection := self._connection_mapper.map_connection(entry)) is not None
        ]
        return Success(value=connections)

    async def initiate_authorization(
        self, provider: Provider
    ) -> Result[InitiationResponse, BackendError]:
        """Request a fresh authorization URL for a provider.

        The endpoint is addressed by the provider's route slug. Refusals
        (4xx with a JSON body) come back as an unsuccessful
        InitiationResponse carrying the backend's message.

        Args:
            provider: Provider to authorize.

        Returns:
            Success(InitiationResponse): Backend answer.
            Failure(BackendError): Transport, auth or payload errors.
        """
        operation = "initiate_authorization"
        path = self._initiate_path_template.format(
            slug=quote(provider.route_slug, safe="")
        )
        result = await self._execute_request(
            method="POST",
            path=path,
            headers=self._headers(),
            json_data={"providerId": provider.id},
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        if response.status_code in _INITIATE_REFUSAL_STATUSES:
            decoded = self._decode_json_object(response, operation)
            if isinstance(decoded, Success):
                refusal = self._initiation_mapper.map_response(decoded.value)
                self._logger.info(
                    "linking_api_initiate_refused",
                    operation=operation,
                    provider_id=provider.id,
                    status_code=response.status_code,
                )
                return Success(
                    value=InitiationResponse(success=False, error=refusal.error)
                )

        parsed = self._parse_json_object(response, operation)
        if isinstance(parsed, Failure):
            return parsed

        return Success(value=self._initiation_mapper.map_response(parsed.value))
