"""Unit tests for the pollers.

Tests cover:
- ManualPoller: tick fan-out, cancellation, intervals, re-entrant ticks,
  error propagation
- AsyncioPoller: cadence, no overlap with skipped ticks, cancellation
  (sleeping and mid-callback), callback failures logged without stopping
  the job

Architecture:
- AsyncioPoller runs on the test event loop with millisecond intervals
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from gamelink.infrastructure.scheduling import AsyncioPoller, ManualPoller


@pytest.mark.unit
class TestManualPoller:
    """Test ManualPoller."""

    async def test_tick_runs_every_job_once(self):
        """Test tick() fires all live jobs and reports the count."""
        # Arrange
        poller = ManualPoller()
        calls: list[str] = []

        async def first() -> None:
            calls.append("first")

        async def second() -> None:
            calls.append("second")

        poller.schedule(5.0, first)
        poller.schedule(1.0, second)

        # Act
        fired = await poller.tick()

        # Assert
        assert fired == 2
        assert calls == ["first", "second"]

    async def test_cancelled_job_never_runs(self):
        poller = ManualPoller()
        callback = MagicMock()

        async def on_tick() -> None:
            callback()

        token = poller.schedule(5.0, on_tick)
        poller.cancel(token)
        poller.cancel(token)

        assert await poller.tick() == 0
        callback.assert_not_called()
        assert token.cancelled is True
        assert poller.active_jobs == 0
        assert poller.interval_of(token) is None

    async def test_job_cancelled_by_earlier_callback_is_skipped(self):
        """Test cancel() inside a tick stops a job queued later in that tick."""
        poller = ManualPoller()
        ran: list[str] = []
        tokens = {}

        async def canceller() -> None:
            ran.append("canceller")
            poller.cancel(tokens["victim"])

        async def victim() -> None:
            ran.append("victim")

        poller.schedule(5.0, canceller)
        tokens["victim"] = poller.schedule(5.0, victim)

        fired = await poller.tick()

        assert fired == 1
        assert ran == ["canceller"]

    async def test_callback_exception_propagates(self):
        poller = ManualPoller()

        async def broken() -> None:
            raise RuntimeError("boom")

        poller.schedule(5.0, broken)

        with pytest.raises(RuntimeError, match="boom"):
            await poller.tick()

    def test_interval_must_be_positive(self):
        poller = ManualPoller()

        async def on_tick() -> None:
            return None

        with pytest.raises(ValueError):
            poller.schedule(0, on_tick)

    async def test_tick_skips_job_whose_previous_tick_is_running(self):
        """Test a re-entrant tick() never runs a callback concurrently with itself."""
        # Arrange
        poller = ManualPoller()
        started = asyncio.Event()
        release = asyncio.Event()
        calls = 0

        async def gated() -> None:
            nonlocal calls
            calls += 1
            started.set()
            await release.wait()

        poller.schedule(5.0, gated)
        first = asyncio.create_task(poller.tick())
        await started.wait()

        # Act
        overlapping = await poller.tick()
        release.set()
        completed = await first

        # Assert
        assert overlapping == 0
        assert completed == 1
        assert calls == 1
        assert await poller.tick() == 1

    def test_interval_of_live_job(self):
        poller = ManualPoller()

        async def on_tick() -> None:
            return None

        token = poller.schedule(5.0, on_tick)

        assert poller.interval_of(token) == 5.0


@pytest.mark.unit
class TestAsyncioPoller:
    """Test AsyncioPoller."""

    async def test_ticks_repeat_until_cancelled(self):
        """Test a job fires repeatedly and stops after cancel()."""
        # Arrange
        poller = AsyncioPoller(logger=MagicMock())
        count = 0

        async def on_tick() -> None:
            nonlocal count
            count += 1

        # Act
        token = poller.schedule(0.01, on_tick)
        await asyncio.sleep(0.1)
        poller.cancel(token)
        seen = count
        await asyncio.sleep(0.05)

        # Assert
        assert seen >= 2
        assert count == seen
        assert poller.active_jobs == 0

    async def test_first_tick_waits_one_interval(self):
        poller = AsyncioPoller(logger=MagicMock())
        callback = MagicMock()

        async def on_tick() -> None:
            callback()

        token = poller.schedule(10.0, on_tick)
        await asyncio.sleep(0.01)
        poller.cancel(token)

        callback.assert_not_called()

    async def test_cancel_does_not_interrupt_running_callback(self):
        """Test a callback in flight during cancel() runs to completion once."""
        # Arrange
        poller = AsyncioPoller(logger=MagicMock())
        started = asyncio.Event()
        release = asyncio.Event()
        finished: list[bool] = []

        async def slow_tick() -> None:
            started.set()
            await release.wait()
            finished.append(True)

        token = poller.schedule(0.01, slow_tick)
        await started.wait()

        # Act
        poller.cancel(token)
        release.set()
        await asyncio.sleep(0.05)

        # Assert
        assert finished == [True]
        assert poller.active_jobs == 0

    async def test_slow_callback_never_overlaps_and_skips_missed_ticks(self):
        """Test a callback slower than the interval runs one at a time."""
        # Arrange
        logger = MagicMock()
        poller = AsyncioPoller(logger=logger)
        in_flight = 0
        peak = 0
        calls = 0

        async def slow_tick() -> None:
            nonlocal in_flight, peak, calls
            in_flight += 1
            calls += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.035)
            in_flight -= 1

        # Act
        token = poller.schedule(0.01, slow_tick)
        await asyncio.sleep(0.2)
        poller.cancel(token)
        await asyncio.sleep(0.05)

        # Assert
        assert calls >= 2
        assert peak == 1
        assert in_flight == 0
        skipped = [
            call
            for call in logger.debug.call_args_list
            if call.args[0] == "poller_ticks_skipped"
        ]
        assert skipped
        assert all(call.kwargs["skipped"] >= 1 for call in skipped)

    async def test_callback_failure_is_logged_and_job_continues(self):
        # Arrange
        logger = MagicMock()
        poller = AsyncioPoller(logger=logger)
        count = 0

        async def flaky() -> None:
            nonlocal count
            count += 1
            if count == 1:
                raise RuntimeError("network blip")

        # Act
        token = poller.schedule(0.01, flaky)
        await asyncio.sleep(0.1)
        poller.cancel(token)

        # Assert
        assert count >= 2
        assert logger.error.call_args_list[0].args[0] == "poller_tick_failed"

    async def test_interval_must_be_positive(self):
        poller = AsyncioPoller(logger=MagicMock())

        async def on_tick() -> None:
            return None

        with pytest.raises(ValueError):
            poller.schedule(-1.0, on_tick)

    def test_schedule_requires_running_loop(self):
        poller = AsyncioPoller(logger=MagicMock())

        async def on_tick() -> None:
            return None

        with pytest.raises(RuntimeError):
            poller.schedule(1.0, on_tick)
