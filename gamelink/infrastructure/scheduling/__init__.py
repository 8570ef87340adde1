"""Poller implementations."""

from gamelink.infrastructure.scheduling.asyncio_poller import AsyncioPoller
from gamelink.infrastructure.scheduling.manual_poller import ManualPoller

__all__ = ["AsyncioPoller", "ManualPoller"]
