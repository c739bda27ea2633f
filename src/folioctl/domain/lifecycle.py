"""Phase enums and transition maps for the page's state machines.

Two machines from the component design:
- Typewriter: typing -> pausing -> deleting -> typing, forever.
- Contact submission: idle -> validating -> pending -> success/error -> idle.

Transitions are data so the components and tests check them the same way.
"""

from __future__ import annotations

from enum import StrEnum


class TypingPhase(StrEnum):
    """Phases of the typewriter animation."""

    TYPING = "typing"
    PAUSING = "pausing"
    DELETING = "deleting"


class SubmissionPhase(StrEnum):
    """Display phases of a contact form instance."""

    IDLE = "idle"
    VALIDATING = "validating"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


TYPING_TRANSITIONS: dict[str, list[str]] = {
    "typing": ["typing", "pausing"],
    "pausing": ["deleting", "typing"],  # empty phrase skips deleting
    "deleting": ["deleting", "typing"],
}

SUBMISSION_TRANSITIONS: dict[str, list[str]] = {
    "idle": ["validating"],
    "validating": ["pending", "error"],
    "pending": ["success", "error"],
    "success": ["idle", "validating"],
    "error": ["idle", "validating"],
}

# Phases that hold a message on screen until the auto-reset fires.
DISPLAY_PHASES = frozenset({SubmissionPhase.SUCCESS, SubmissionPhase.ERROR})


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]],
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed
