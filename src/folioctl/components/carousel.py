"""Carousel: a :class:`BoundedIndex` that tells listeners when it moves."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from folioctl.domain.cycle import BoundedIndex

if TYPE_CHECKING:
    from folioctl.components.slots import Slot

Listener = Callable[[int], None]


class Carousel:
    """Wraparound navigation over ``count`` items.

    Listeners get exactly one call per move that changes the active index
    and none when it stays put. An empty carousel is inert.
    """

    def __init__(self, count: int, *, index: int = 0, slot: Slot | None = None) -> None:
        self._position = BoundedIndex(count, index)
        self._listeners: list[Listener] = []
        if slot is not None:
            self._listeners.append(slot.update)

    @property
    def index(self) -> int | None:
        return self._position.index

    @property
    def count(self) -> int:
        return self._position.count

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Add *listener*; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def next(self) -> int | None:
        return self._move(self._position.next)

    def prev(self) -> int | None:
        return self._move(self._position.prev)

    def set_to(self, i: int) -> int | None:
        return self._move(lambda: self._position.set_to(i))

    def resize(self, count: int) -> int | None:
        return self._move(lambda: self._position.resize(count))

    def is_active(self, i: int) -> bool:
        return self._position.is_active(i)

    def _move(self, op: Callable[[], int | None]) -> int | None:
        before = self._position.index
        after = op()
        if after is not None and after != before:
            for listener in list(self._listeners):
                listener(after)
        return after
