"""Domain enums package.

Usage:
    from gamelink.domain.enums import AuthKind, LinkStatus
"""

from gamelink.domain.enums.auth_kind import AuthKind
from gamelink.domain.enums.link_status import LinkStatus

__all__ = ["AuthKind", "LinkStatus"]
