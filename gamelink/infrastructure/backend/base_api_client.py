"""Base API client for linking backend HTTP communication.

Handles for subclasses:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with service context

Architecture:
    - Infrastructure layer (adapter for the remote backend)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for transport errors)
"""

from typing import Any

import httpx
import structlog

from gamelink.core.constants import BACKEND_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from gamelink.core.enums import ErrorCode
from gamelink.core.result import Failure, Result, Success
from gamelink.domain.errors import (
    BackendAuthenticationError,
    BackendError,
    BackendInvalidResponseError,
    BackendUnavailableError,
)


class BaseAPIClient:
    """Base class for backend API clients with shared HTTP handling.

    Attributes:
        _base_url: Backend base URL (without trailing slash).
        _service_name: Service identifier for logging and messages.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with service context.

    Example:
        >>> class CatalogAPI(BaseAPIClient):
        ...     async def get_catalog(self):
        ...         return await self._execute_and_parse_object(
        ...             method="GET",
        ...             path="/catalog",
        ...             headers={},
        ...             operation="get_catalog",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str = "linking",
        timeout: float = BACKEND_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize base API client.

        Args:
            base_url: Backend base URL (e.g., "http://localhost:4000").
            service_name: Service identifier used in logs and messages.
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{service_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, BackendError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            headers: HTTP headers including authentication.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(BackendUnavailableError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=BackendUnavailableError(
                    code=ErrorCode.BACKEND_UNAVAILABLE,
                    message=f"{self._service_name.title()} API request timed out",
                    operation=operation,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=BackendUnavailableError(
                    code=ErrorCode.BACKEND_UNAVAILABLE,
                    message=f"Failed to connect to {self._service_name.title()} API: {e}",
                    operation=operation,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[BackendError] | None:
        """Check HTTP response for errors and return the matching BackendError.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(BackendError) if error detected, None if response is OK.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status in (401, 403):
            self._logger.warning(
                f"{self._service_name}_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=BackendAuthenticationError(
                    code=ErrorCode.BACKEND_AUTHENTICATION_FAILED,
                    message="Session is not authorized; sign in again",
                    operation=operation,
                )
            )

        if status == 429 or status >= 500:
            self._logger.warning(
                f"{self._service_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=BackendUnavailableError(
                    code=ErrorCode.BACKEND_UNAVAILABLE,
                    message=f"{self._service_name.title()} API unavailable: {status}",
                    operation=operation,
                )
            )

        self._logger.warning(
            f"{self._service_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=BackendInvalidResponseError(
                code=ErrorCode.BACKEND_INVALID_RESPONSE,
                message=f"Unexpected response from {self._service_name.title()} API: {status}",
                operation=operation,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _decode_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], BackendError]:
        """Decode a response body as a JSON object, ignoring status code.

        Args:
            response: HTTP response to decode.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(BackendInvalidResponseError): On invalid JSON or non-object.
        """
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._service_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=BackendInvalidResponseError(
                    code=ErrorCode.BACKEND_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {self._service_name.title()} API",
                    operation=operation,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._service_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=BackendInvalidResponseError(
                    code=ErrorCode.BACKEND_INVALID_RESPONSE,
                    message=f"Expected object response from {self._service_name.title()} API",
                    operation=operation,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        return Success(value=data)

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], BackendError]:
        """Check status, then parse response as JSON object.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(BackendError): On HTTP error or invalid JSON.
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        result = self._decode_json_object(response, operation)
        if isinstance(result, Success):
            self._logger.debug(
                f"{self._service_name}_api_succeeded",
                operation=operation,
            )
        return result

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], BackendError]:
        """Execute request and parse response as JSON object.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(BackendError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            headers=headers,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)
