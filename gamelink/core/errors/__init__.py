"""Core errors package.

Usage:
    from gamelink.core.errors import DomainError, NotFoundError
"""

from gamelink.core.errors.common_errors import NotFoundError
from gamelink.core.errors.domain_error import DomainError

__all__ = ["DomainError", "NotFoundError"]
