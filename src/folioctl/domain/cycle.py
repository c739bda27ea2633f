"""Wraparound positions: carousel indices and the typewriter phrase cycle.

INVARIANT: ``0 <= index < count`` whenever ``count > 0``.
An empty collection is inert: it has no index and every move is a no-op.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def wrap_index(i: int, count: int) -> int:
    """Floor-modulo *i* into ``[0, count)``.

    Negative inputs wrap to the high end::

        >>> wrap_index(-1, 3)
        2
        >>> wrap_index(7, 3)
        1
    """
    if count <= 0:
        msg = f"count must be positive, got {count}"
        raise ValueError(msg)
    return ((i % count) + count) % count


class BoundedIndex:
    """A position within a fixed-size collection that wraps instead of overflowing."""

    __slots__ = ("_count", "_index")

    def __init__(self, count: int, index: int = 0) -> None:
        self._count = max(count, 0)
        self._index: int | None = wrap_index(index, self._count) if self._count else None

    @property
    def count(self) -> int:
        return self._count

    @property
    def index(self) -> int | None:
        """Current position, or None for an empty collection."""
        return self._index

    @property
    def is_inert(self) -> bool:
        return self._count == 0

    def set_to(self, i: int) -> int | None:
        """Move to *i* (normalised). Returns the new index, None when inert."""
        if self._count == 0:
            return None
        self._index = wrap_index(i, self._count)
        return self._index

    def next(self) -> int | None:
        if self._index is None:
            return None
        return self.set_to(self._index + 1)

    def prev(self) -> int | None:
        if self._index is None:
            return None
        return self.set_to(self._index - 1)

    def is_active(self, i: int) -> bool:
        """Whether item *i* is the one currently shown."""
        return self._index is not None and self._index == i

    def resize(self, count: int) -> int | None:
        """Change the collection size, keeping the position when it still fits."""
        self._count = max(count, 0)
        if self._count == 0:
            self._index = None
        elif self._index is None:
            self._index = 0
        else:
            self._index = wrap_index(self._index, self._count)
        return self._index

    def __repr__(self) -> str:
        return f"BoundedIndex(count={self._count}, index={self._index})"


class PhraseCycle:
    """Ordered, immutable phrase list with a wrapping cursor."""

    __slots__ = ("_phrases", "_position")

    def __init__(self, phrases: Iterable[str], index: int = 0) -> None:
        self._phrases: tuple[str, ...] = tuple(phrases)
        self._position = BoundedIndex(len(self._phrases), index)

    @property
    def phrases(self) -> Sequence[str]:
        return self._phrases

    @property
    def index(self) -> int | None:
        return self._position.index

    @property
    def current(self) -> str | None:
        """The phrase under the cursor, or None when the cycle is empty."""
        idx = self._position.index
        return None if idx is None else self._phrases[idx]

    def advance(self) -> int | None:
        return self._position.next()

    def is_empty(self) -> bool:
        return not self._phrases

    def __len__(self) -> int:
        return len(self._phrases)
