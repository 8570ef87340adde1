"""Machine-readable error codes.

Codes follow the ENTITY_ACTION_REASON naming convention and travel inside
DomainError values (never raised).
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Resource errors
    PROVIDER_NOT_FOUND = "provider_not_found"

    # Linking backend errors
    BACKEND_UNAVAILABLE = "backend_unavailable"
    BACKEND_AUTHENTICATION_FAILED = "backend_authentication_failed"
    BACKEND_INVALID_RESPONSE = "backend_invalid_response"

    # Link workflow errors
    LINK_INITIATION_FAILED = "link_initiation_failed"
    LINK_REFRESH_FAILED = "link_refresh_failed"
    LINK_TIMED_OUT = "link_timed_out"
