"""Linking backend error types.

Failure cases the linking backend adapter can return. They are part of
the LinkingBackendProtocol contract.

Architecture:
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- Infrastructure adapters return these, never raise them

Usage:
    async def fetch_connections(self) -> Result[list[Connection], BackendError]:
        if response.status_code >= 500:
            return Failure(error=BackendUnavailableError(...))
        return Success(value=connections)
"""

from dataclasses import dataclass

from gamelink.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class BackendError(DomainError):
    """Base linking backend error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        operation: Backend operation that failed (fetch_connections, ...).
    """

    operation: str


@dataclass(frozen=True, slots=True, kw_only=True)
class BackendUnavailableError(BackendError):
    """Backend unreachable or failing.

    Raised when:
    - Connection timeout occurs
    - DNS resolution or TCP connect fails
    - Backend returns 5xx

    Attributes:
        is_transient: Whether a retry is likely to succeed.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class BackendAuthenticationError(BackendError):
    """Backend rejected the user's identity token (401/403).

    Recovery: user must sign in again; not retried by the workflow.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class BackendInvalidResponseError(BackendError):
    """Backend returned a malformed or unexpected payload.

    Attributes:
        response_body: Truncated raw body for debugging.
    """

    response_body: str | None = None
