"""Centralized constants for internal implementation details.

These values are part of the linking workflow contract, not
environment-specific configuration. Settings in `gamelink/core/config.py`
default to them.

Example:
    >>> from gamelink.core.constants import POLL_INTERVAL_SECONDS
    >>> poller.schedule(POLL_INTERVAL_SECONDS, tick)
"""

from datetime import timedelta

# =============================================================================
# Link Workflow Timing
# =============================================================================

POLL_INTERVAL_SECONDS: float = 5.0
"""Cadence of connection registry refreshes while an attempt is polling."""

AUTHORIZATION_TIMEOUT: timedelta = timedelta(minutes=10)
"""How long polling continues after the authorization surface is opened."""


# =============================================================================
# HTTP
# =============================================================================

BACKEND_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for linking backend calls in seconds."""

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in error details."""


# =============================================================================
# User-Facing Messages
# =============================================================================

GENERIC_INITIATION_ERROR: str = "Failed to initiate authentication"
"""Shown when the backend rejects initiation without an explanation."""
