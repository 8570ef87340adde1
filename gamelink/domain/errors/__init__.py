"""Domain errors package.

Usage:
    from gamelink.domain.errors import LinkAttemptError, InitiationError
    from gamelink.domain.errors import BackendError, BackendUnavailableError
"""

from gamelink.domain.errors.backend_error import (
    BackendAuthenticationError,
    BackendError,
    BackendInvalidResponseError,
    BackendUnavailableError,
)
from gamelink.domain.errors.link_attempt_error import LinkAttemptError
from gamelink.domain.errors.link_errors import (
    InitiationError,
    LinkTimeoutError,
    PollTransientError,
)

__all__ = [
    "BackendAuthenticationError",
    "BackendError",
    "BackendInvalidResponseError",
    "BackendUnavailableError",
    "InitiationError",
    "LinkAttemptError",
    "LinkTimeoutError",
    "PollTransientError",
]
