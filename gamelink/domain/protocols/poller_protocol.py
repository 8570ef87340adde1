"""PollerProtocol - cancellable repeating task scheduler.

Architecture:
- Domain layer protocol (no asyncio imports)
- Implemented by AsyncioPoller (event-loop driven) and ManualPoller
  (host/test driven) in infrastructure/scheduling

Guarantees every implementation must provide:
    1. A job's callback never runs concurrently with itself. A tick that
       comes due while the previous one is still running is skipped.
    2. cancel() is synchronous: once it returns, the callback is never
       invoked again, including a tick that was already due but not yet
       started.

Usage:
    token = poller.schedule(5.0, session_tick)
    ...
    poller.cancel(token)
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from uuid_extensions import uuid7

type TickCallback = Callable[[], Awaitable[None]]


@dataclass(eq=False)
class CancelToken:
    """Handle identifying one scheduled job.

    Compared by identity. `cancelled` is flipped by the poller that issued
    the token.

    Attributes:
        id: Token identifier (for logging).
        cancelled: Whether the job has been cancelled.
    """

    id: UUID = field(default_factory=uuid7)
    cancelled: bool = False


class PollerProtocol(Protocol):
    """Protocol for repeating-task schedulers."""

    def schedule(self, interval_seconds: float, callback: TickCallback) -> CancelToken:
        """Run `callback` every `interval_seconds` until cancelled.

        The first invocation happens one interval after scheduling.

        Args:
            interval_seconds: Fixed cadence between ticks.
            callback: Coroutine function invoked on each tick.

        Returns:
            CancelToken: Handle for cancel().
        """
        ...

    def cancel(self, token: CancelToken) -> None:
        """Stop a scheduled job. Idempotent.

        Args:
            token: Handle returned by schedule().
        """
        ...
