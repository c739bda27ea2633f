"""Display targets the components write to."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class Slot(Protocol):
    def update(self, value: Any) -> None: ...


class ValueSlot:
    """Holds only the latest value."""

    def __init__(self, name: str = "", initial: Any = "") -> None:
        self.name = name
        self.value: Any = initial

    def update(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ValueSlot({self.name!r}, value={self.value!r})"


class RecordingSlot:
    """Keeps every value it was given; ``value`` is the latest. Meant for tests and previews."""

    def __init__(self, name: str = "", initial: Any = "") -> None:
        self.name = name
        self.value: Any = initial
        self.history: list[Any] = []

    def update(self, value: Any) -> None:
        self.value = value
        self.history.append(value)

    def __repr__(self) -> str:
        return f"RecordingSlot({self.name!r}, value={self.value!r})"


class CallbackSlot:
    """Forwards each update to *callback* (the CLI uses it to redraw a line)."""

    def __init__(self, callback: Callable[[Any], None]) -> None:
        self._callback = callback

    def update(self, value: Any) -> None:
        self._callback(value)
