"""Application services.

Usage:
    from gamelink.application.services import (
        ConnectionRegistry,
        LinkSession,
        ProviderCatalog,
    )
"""

from gamelink.application.services.connection_registry import (
    ConnectionRegistry,
    ConnectionView,
)
from gamelink.application.services.link_session import LinkSession
from gamelink.application.services.provider_catalog import ProviderCatalog

__all__ = [
    "ConnectionRegistry",
    "ConnectionView",
    "LinkSession",
    "ProviderCatalog",
]
