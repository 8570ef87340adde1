"""Manually driven poller.

Ticks happen only when the host calls tick(). Useful for hosts that own
their own timer (a UI toolkit loop) and for deterministic tests paired
with a fake clock.
"""

from dataclasses import dataclass

from gamelink.domain.protocols.poller_protocol import CancelToken, TickCallback


@dataclass(eq=False)
class _ManualJob:
    interval_seconds: float
    callback: TickCallback
    running: bool = False


class ManualPoller:
    """PollerProtocol implementation driven by explicit ticks.

    Example:
        >>> poller = ManualPoller()
        >>> token = poller.schedule(5.0, on_tick)
        >>> await poller.tick()  # runs on_tick once
        1
        >>> poller.cancel(token)
        >>> await poller.tick()
        0
    """

    def __init__(self) -> None:
        self._jobs: dict[CancelToken, _ManualJob] = {}

    @property
    def active_jobs(self) -> int:
        """Number of jobs not yet cancelled."""
        return len(self._jobs)

    def interval_of(self, token: CancelToken) -> float | None:
        """Interval a live job was scheduled with, None if cancelled."""
        job = self._jobs.get(token)
        return job.interval_seconds if job is not None else None

    def schedule(self, interval_seconds: float, callback: TickCallback) -> CancelToken:
        """Register a job; it runs on each subsequent tick().

        Raises:
            ValueError: If interval is not positive.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        token = CancelToken()
        self._jobs[token] = _ManualJob(
            interval_seconds=interval_seconds, callback=callback
        )
        return token

    def cancel(self, token: CancelToken) -> None:
        """Stop a job synchronously. Idempotent."""
        token.cancelled = True
        self._jobs.pop(token, None)

    async def tick(self) -> int:
        """Fire every live job once.

        Jobs whose previous tick is still running are skipped. A job
        cancelled by an earlier callback in the same tick is not run.

        Returns:
            int: Number of callbacks invoked.
        """
        fired = 0
        for token, job in list(self._jobs.items()):
            if token.cancelled or job.running:
                continue
            job.running = True
            try:
                await job.callback()
            finally:
                job.running = False
            fired += 1
        return fired
