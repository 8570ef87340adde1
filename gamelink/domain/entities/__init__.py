"""Domain entities package.

Usage:
    from gamelink.domain.entities import Connection, LinkAttempt, Provider
"""

from gamelink.domain.entities.connection import Connection
from gamelink.domain.entities.link_attempt import LinkAttempt
from gamelink.domain.entities.provider import Provider

__all__ = ["Connection", "LinkAttempt", "Provider"]
