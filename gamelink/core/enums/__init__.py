"""Core enums package.

Usage:
    from gamelink.core.enums import ErrorCode, Environment
"""

from gamelink.core.enums.environment import Environment
from gamelink.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
