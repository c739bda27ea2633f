"""Single-slot toast that hides itself after a fixed time."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folioctl.components.slots import Slot
    from folioctl.infrastructure.scheduler import Scheduler, TimerHandle


class Toast:
    """Shows one message at a time; a new message restarts the hide timer."""

    def __init__(self, scheduler: Scheduler, slot: Slot, *, duration_ms: float = 2400) -> None:
        self._scheduler = scheduler
        self._slot = slot
        self.duration_ms = duration_ms
        self._message = ""
        self._hide_handle: TimerHandle | None = None

    @property
    def message(self) -> str:
        return self._message

    @property
    def visible(self) -> bool:
        return bool(self._message)

    def show(self, message: str) -> None:
        self._cancel()
        self._message = message
        self._slot.update(message)
        self._hide_handle = self._scheduler.schedule_after(self.duration_ms, self.hide)

    def hide(self) -> None:
        self._cancel()
        if self._message:
            self._message = ""
            self._slot.update("")

    def dispose(self) -> None:
        self._cancel()

    def _cancel(self) -> None:
        if self._hide_handle is not None:
            self._hide_handle.cancel()
            self._hide_handle = None
