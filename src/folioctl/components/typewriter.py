"""Typewriter component: drives :func:`folioctl.domain.typewriter.advance`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from folioctl.domain.typewriter import TypingState, TypingTiming, advance, render

if TYPE_CHECKING:
    from folioctl.components.slots import Slot
    from folioctl.infrastructure.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class Typewriter:
    """Types, holds, and deletes each phrase in turn, forever.

    INVARIANT: at most one pending timer. After :meth:`stop` nothing
    further is written to the slot.
    """

    def __init__(
        self,
        phrases: Iterable[str],
        scheduler: Scheduler,
        slot: Slot,
        timing: TypingTiming | None = None,
    ) -> None:
        self._phrases: tuple[str, ...] = tuple(phrases)
        self._scheduler = scheduler
        self._slot = slot
        self._timing = timing or TypingTiming()
        self._state = TypingState()
        self._handle: TimerHandle | None = None

    @property
    def state(self) -> TypingState:
        return self._state

    @property
    def phrases(self) -> tuple[str, ...]:
        return self._phrases

    @property
    def running(self) -> bool:
        return self._handle is not None and self._handle.active

    @property
    def text(self) -> str:
        return render(self._state, self._phrases)

    def start(self) -> None:
        """Render the first character now and keep ticking.

        No-op while already running or when there are no phrases.
        """
        if self.running:
            return
        if not self._phrases:
            logger.debug("Typewriter has no phrases; staying idle")
            return
        self._tick()

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._state, delay = advance(self._state, self._phrases, self._timing)
        self._slot.update(self.text)
        self._handle = self._scheduler.schedule_after(delay, self._tick)
