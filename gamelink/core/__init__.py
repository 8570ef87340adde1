"""Core shared kernel.

Foundational utilities used by every layer:
- Result types for railway-oriented programming
- Base error values
- Configuration and constants

The core package has NO dependencies on other gamelink layers.
"""

from gamelink.core.enums import ErrorCode
from gamelink.core.errors import DomainError, NotFoundError
from gamelink.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
