"""Asyncio-backed poller.

Runs each scheduled job as a task on the running event loop with a fixed
cadence. A job's next tick is awaited only after the previous callback
returns, so ticks never overlap; ticks missed while a slow callback ran
are skipped rather than replayed.

Cancellation never interrupts a callback that is already running (an
in-flight refresh request is left to finish and its result is discarded
by the caller); a job that is sleeping is woken and stopped immediately.
"""

import asyncio
from dataclasses import dataclass

from gamelink.domain.protocols.logger_protocol import LoggerProtocol
from gamelink.domain.protocols.poller_protocol import CancelToken, TickCallback


@dataclass(eq=False)
class _Job:
    task: asyncio.Task[None]
    running: bool = False


class AsyncioPoller:
    """PollerProtocol implementation on the asyncio event loop.

    Must be used from within a running event loop.

    Args:
        logger: Structured logger for callback failures.
    """

    def __init__(self, *, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._jobs: dict[CancelToken, _Job] = {}

    @property
    def active_jobs(self) -> int:
        """Number of jobs not yet cancelled."""
        return len(self._jobs)

    def schedule(self, interval_seconds: float, callback: TickCallback) -> CancelToken:
        """Start a repeating job.

        Args:
            interval_seconds: Fixed cadence (must be positive).
            callback: Coroutine function invoked each tick.

        Returns:
            CancelToken: Handle for cancel().

        Raises:
            ValueError: If interval is not positive.
            RuntimeError: If no event loop is running.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        loop = asyncio.get_running_loop()
        token = CancelToken()
        task = loop.create_task(self._run(token, interval_seconds, callback))
        self._jobs[token] = _Job(task=task)
        return token

    def cancel(self, token: CancelToken) -> None:
        """Stop a job synchronously. Idempotent.

        Args:
            token: Handle returned by schedule().
        """
        token.cancelled = True
        job = self._jobs.pop(token, None)
        if job is None:
            return
        if not job.running:
            job.task.cancel()

    async def _run(
        self, token: CancelToken, interval_seconds: float, callback: TickCallback
    ) -> None:
        loop = asyncio.get_running_loop()
        next_due = loop.time() + interval_seconds

        while not token.cancelled:
            await asyncio.sleep(max(0.0, next_due - loop.time()))
            if token.cancelled:
                return

            job = self._jobs.get(token)
            if job is None:
                return

            job.running = True
            try:
                await callback()
            except Exception as e:
                self._logger.error(
                    "poller_tick_failed", error=e, token_id=str(token.id)
                )
            finally:
                job.running = False

            now = loop.time()
            next_due += interval_seconds
            if next_due <= now:
                skipped = int((now - next_due) // interval_seconds) + 1
                next_due += skipped * interval_seconds
                self._logger.debug(
                    "poller_ticks_skipped", skipped=skipped, token_id=str(token.id)
                )
