"""Domain protocols package.

Structural (PEP 544) interfaces implemented by infrastructure adapters.
"""

from gamelink.domain.protocols.authorization_surface_protocol import (
    AuthorizationSurfaceProtocol,
)
from gamelink.domain.protocols.clock_protocol import ClockProtocol
from gamelink.domain.protocols.linking_backend_protocol import LinkingBackendProtocol
from gamelink.domain.protocols.logger_protocol import LoggerProtocol
from gamelink.domain.protocols.poller_protocol import (
    CancelToken,
    PollerProtocol,
    TickCallback,
)

__all__ = [
    "AuthorizationSurfaceProtocol",
    "CancelToken",
    "ClockProtocol",
    "LinkingBackendProtocol",
    "LoggerProtocol",
    "PollerProtocol",
    "TickCallback",
]
