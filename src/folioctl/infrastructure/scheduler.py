"""Fire-after-delay timers for the page components.

Components never sleep or spawn threads. They call
``scheduler.schedule_after(delay_ms, callback)`` and keep the returned
handle so they can cancel it before re-scheduling or on teardown.

Two schedulers:
- :class:`ManualScheduler` — virtual clock advanced explicitly. Tests use it
  to simulate time; the CLI uses :meth:`ManualScheduler.run_for` with a real
  ``sleep`` to animate in the terminal.
- :class:`AsyncioScheduler` — ``loop.call_later`` on a running event loop.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class TimerHandle:
    """A scheduled callback that can be cancelled until it fires."""

    __slots__ = ("_callback", "_cancelled", "_fired", "due_ms")

    def __init__(self, due_ms: float, callback: Callback) -> None:
        self.due_ms = due_ms
        self._callback = callback
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        """True until the callback has run or the handle was cancelled."""
        return not (self._cancelled or self._fired)

    def cancel(self) -> None:
        self._cancelled = True

    def fire(self) -> None:
        if not self.active:
            return
        self._fired = True
        self._callback()


class Scheduler(Protocol):
    def schedule_after(self, delay_ms: float, callback: Callback) -> TimerHandle: ...

    def now_ms(self) -> float: ...


class ManualScheduler:
    """Deterministic scheduler driven by :meth:`advance`.

    Due callbacks fire in due-time order, FIFO among equal times. A callback
    that schedules a new timer already due within the current advance window
    runs in the same call.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def now_ms(self) -> float:
        return self._now

    def schedule_after(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(self._now + max(delay_ms, 0), callback)
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        """Number of timers that have neither fired nor been cancelled."""
        return sum(1 for _, _, h in self._queue if h.active)

    def next_due(self) -> float | None:
        self._drop_cancelled()
        return self._queue[0][0] if self._queue else None

    def advance(self, ms: float) -> int:
        """Move the clock forward by *ms*, firing everything due. Returns the count fired."""
        target = self._now + ms
        fired = 0
        while True:
            due = self.next_due()
            if due is None or due > target:
                break
            _, _, handle = heapq.heappop(self._queue)
            self._now = due
            handle.fire()
            fired += 1
        self._now = target
        return fired

    def run_for(
        self,
        duration_ms: float,
        *,
        sleep: Callable[[float], None] | None = None,
    ) -> int:
        """Advance through *duration_ms* one timer at a time.

        With *sleep* (e.g. ``time.sleep``) the gaps between timers are waited
        out in real time, which is how the CLI animates the typewriter.
        """
        end = self._now + duration_ms
        fired = 0
        while True:
            due = self.next_due()
            if due is None or due > end:
                break
            if sleep is not None and due > self._now:
                sleep((due - self._now) / 1000)
            fired += self.advance(due - self._now)
        if sleep is not None and end > self._now:
            sleep((end - self._now) / 1000)
        self._now = end
        return fired

    def _drop_cancelled(self) -> None:
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)


class _AsyncioTimerHandle(TimerHandle):
    __slots__ = ("_inner",)

    def __init__(self, due_ms: float, callback: Callback) -> None:
        super().__init__(due_ms, callback)
        self._inner: asyncio.TimerHandle | None = None

    def cancel(self) -> None:
        super().cancel()
        if self._inner is not None:
            self._inner.cancel()


class AsyncioScheduler:
    """Scheduler on top of an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def now_ms(self) -> float:
        return self._loop.time() * 1000

    def schedule_after(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = _AsyncioTimerHandle(self.now_ms() + max(delay_ms, 0), callback)
        handle._inner = self._loop.call_later(max(delay_ms, 0) / 1000, self._run, handle)
        return handle

    @staticmethod
    def _run(handle: TimerHandle) -> None:
        try:
            handle.fire()
        except Exception:
            logger.exception("Scheduled callback failed")
