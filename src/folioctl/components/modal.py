"""Project and legal modal overlays."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folioctl.domain.catalog import get_legal_document, get_project
from folioctl.domain.types import ModalKind

if TYPE_CHECKING:
    from pydantic import BaseModel

    from folioctl.components.slots import Slot

ESCAPE_KEY = "Escape"


class ModalController:
    """Tracks which overlay is open and with which content.

    Opening an unknown key leaves the current state untouched.
    """

    def __init__(self, *, slot: Slot | None = None) -> None:
        self._slot = slot
        self._kind: ModalKind | None = None
        self._key: str | None = None
        self._content: BaseModel | None = None

    @property
    def is_open(self) -> bool:
        return self._kind is not None

    @property
    def kind(self) -> ModalKind | None:
        return self._kind

    @property
    def key(self) -> str | None:
        return self._key

    @property
    def content(self) -> BaseModel | None:
        return self._content

    def open(self, kind: ModalKind | str, key: str) -> bool:
        """Show the project or legal document *key*. Returns False if unknown."""
        try:
            modal = ModalKind(kind)
        except ValueError:
            return False
        content: BaseModel | None
        if modal is ModalKind.PROJECT:
            content = get_project(key)
        else:
            content = get_legal_document(key)
        if content is None:
            return False
        self._kind, self._key, self._content = modal, key, content
        self._notify()
        return True

    def close(self) -> None:
        if self._kind is None:
            return
        self._kind = self._key = self._content = None
        self._notify()

    def handle_key(self, key: str) -> bool:
        """Keyboard handler; Escape closes an open modal."""
        if key == ESCAPE_KEY and self.is_open:
            self.close()
            return True
        return False

    def _notify(self) -> None:
        if self._slot is not None:
            self._slot.update(self.is_open)
