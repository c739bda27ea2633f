"""PreviewService — run page components against a virtual clock.

Used by the ``typewriter`` and ``carousel`` commands to show what the page
would display, either as a recorded list of frames or animated live.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from folioctl.components.carousel import Carousel
from folioctl.components.slots import CallbackSlot, RecordingSlot
from folioctl.components.typewriter import Typewriter
from folioctl.domain.typewriter import TypingTiming
from folioctl.infrastructure.scheduler import ManualScheduler
from folioctl.services.base import BaseService
from folioctl.services.result import ServiceResult

CAROUSEL_MOVES = ("next", "prev")


def parse_move(move: str) -> tuple[str, int | None]:
    """``next`` / ``prev`` / ``set:<i>`` (also ``<i>`` alone) -> (kind, arg)."""
    move = move.strip().lower()
    if move in CAROUSEL_MOVES:
        return move, None
    raw = move.removeprefix("set:")
    try:
        return "set", int(raw)
    except ValueError:
        msg = f"Unknown carousel move {move!r}"
        raise ValueError(msg) from None


class PreviewService(BaseService):
    """Drives components the same way the page does."""

    def typewriter(
        self,
        *,
        duration_ms: float = 5000,
        roles: Sequence[str] | None = None,
        sleep: Callable[[float], None] | None = None,
        on_frame: Callable[[str], None] | None = None,
    ) -> ServiceResult:
        """Run the typewriter for *duration_ms* of (virtual) time.

        With *sleep* the clock follows real time; *on_frame* sees each render.
        """
        cfg = self.settings.typewriter
        phrases = list(roles) if roles else list(cfg.roles)
        timing = TypingTiming(
            typing_ms=cfg.typing_speed_ms,
            deleting_ms=cfg.deleting_speed_ms,
            pause_ms=cfg.pause_ms,
            word_pause_ms=cfg.word_pause_ms,
        )
        frames: list[str] = []

        def record(text: Any) -> None:
            frames.append(str(text))
            if on_frame is not None:
                on_frame(str(text))

        scheduler = ManualScheduler()
        writer = Typewriter(phrases, scheduler, CallbackSlot(record), timing)
        writer.start()
        scheduler.run_for(duration_ms, sleep=sleep)
        writer.stop()

        return ServiceResult(
            ok=True,
            op="typewriter",
            data={
                "phrases": phrases,
                "ticks": len(frames),
                "frames": frames,
                "text": writer.text,
            },
            warnings=[] if phrases else ["No phrases configured; the typewriter stays idle"],
        )

    def carousel(self, count: int, moves: Iterable[str], *, start: int = 0) -> ServiceResult:
        """Apply *moves* to a carousel of *count* items and record each change."""
        op = "carousel"
        try:
            parsed = [parse_move(m) for m in moves]
        except ValueError as exc:
            return ServiceResult.failure(
                op, "invalid_move", str(exc), detail={"choices": [*CAROUSEL_MOVES, "set:<i>"]}
            )

        slot = RecordingSlot("active-index")
        carousel = Carousel(count, index=start, slot=slot)
        for kind, arg in parsed:
            if kind == "next":
                carousel.next()
            elif kind == "prev":
                carousel.prev()
            else:
                assert arg is not None
                carousel.set_to(arg)

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": carousel.count, "frames": slot.history, "index": carousel.index},
            warnings=[] if count > 0 else ["Empty carousel; moves were ignored"],
        )
