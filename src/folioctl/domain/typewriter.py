"""Typewriter animation as a pure transition function.

``advance`` takes the current state and returns the next state plus the
delay before the following tick. The component in
:mod:`folioctl.components.typewriter` only renders and schedules.

Tick semantics:
- typing:   one more character; at full length switch to pausing.
- pausing:  the pause has elapsed; delete the first character.
- deleting: one fewer character; at zero move to the next phrase.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from folioctl.domain.cycle import wrap_index
from folioctl.domain.lifecycle import TypingPhase

DEFAULT_ROLES: tuple[str, ...] = (
    "fullstack developer",
    "designer",
    "engineer",
    "problem solver",
    "creative thinker",
    "tech enthusiast",
    "innovator",
    "coder",
)


@dataclass(frozen=True)
class TypingTiming:
    """Tick intervals in milliseconds."""

    typing_ms: int = 100
    deleting_ms: int = 50
    pause_ms: int = 2000
    word_pause_ms: int = 500


@dataclass(frozen=True)
class TypingState:
    """Position of the animation: which phrase, how many characters shown."""

    phase: TypingPhase = TypingPhase.TYPING
    index: int = 0
    char_count: int = 0


def render(state: TypingState, phrases: Sequence[str]) -> str:
    """Text currently on screen, always a prefix of the current phrase."""
    if not phrases:
        return ""
    phrase = phrases[state.index]
    return phrase[: max(0, min(state.char_count, len(phrase)))]


def advance(
    state: TypingState,
    phrases: Sequence[str],
    timing: TypingTiming | None = None,
) -> tuple[TypingState, int]:
    """Compute the next state and the delay until the tick after it.

    Raises:
        ValueError: If *phrases* is empty. Callers treat an empty list as inert
            and never tick.
    """
    if not phrases:
        msg = "cannot advance a typewriter with no phrases"
        raise ValueError(msg)
    timing = timing or TypingTiming()
    phrase = phrases[state.index]

    if state.phase is TypingPhase.TYPING:
        count = min(state.char_count + 1, len(phrase))
        if count >= len(phrase):
            return replace(state, phase=TypingPhase.PAUSING, char_count=count), timing.pause_ms
        return replace(state, char_count=count), timing.typing_ms

    # pausing and deleting both remove one character per tick
    count = max(state.char_count - 1, 0)
    if count == 0:
        next_index = wrap_index(state.index + 1, len(phrases))
        return TypingState(TypingPhase.TYPING, next_index, 0), timing.word_pause_ms
    return replace(state, phase=TypingPhase.DELETING, char_count=count), timing.deleting_ms
