"""Theme manager: page-side view of the stored light/dark preference."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folioctl.domain.theme import (
    THEME_KEY,
    meta_theme_color,
    parse_theme,
    resolve_theme,
    toast_message,
    toggled,
)

if TYPE_CHECKING:
    from folioctl.components.slots import Slot
    from folioctl.components.toast import Toast
    from folioctl.domain.types import Theme
    from folioctl.infrastructure.preferences import PreferenceStore


class ThemeManager:
    """Applies the theme to a slot and persists every explicit change.

    Loading never writes; only :meth:`toggle` and :meth:`set` do.
    """

    def __init__(
        self,
        store: PreferenceStore,
        *,
        slot: Slot | None = None,
        meta_slot: Slot | None = None,
        toast: Toast | None = None,
    ) -> None:
        self._store = store
        self._slot = slot
        self._meta_slot = meta_slot
        self._toast = toast
        self._theme: Theme | None = None

    @property
    def theme(self) -> Theme:
        if self._theme is None:
            return self.load()
        return self._theme

    def load(self, prefers_light: bool | None = None) -> Theme:
        theme = resolve_theme(self._store.get(THEME_KEY), prefers_light=prefers_light)
        self._apply(theme)
        return theme

    def toggle(self) -> tuple[Theme, str]:
        """Flip and persist. Returns the new theme and its toast text."""
        theme = toggled(self.theme)
        self._persist(theme)
        message = toast_message(theme)
        if self._toast is not None:
            self._toast.show(message)
        return theme, message

    def set(self, value: str) -> Theme:
        theme = parse_theme(value)
        if theme is None:
            msg = f"Unknown theme {value!r}; expected 'light' or 'dark'"
            raise ValueError(msg)
        self._persist(theme)
        return theme

    def on_system_change(self, prefers_light: bool) -> Theme:
        """Follow the OS setting unless the visitor picked a theme."""
        if parse_theme(self._store.get(THEME_KEY)) is None:
            self._apply(resolve_theme(None, prefers_light=prefers_light))
        return self.theme

    def _persist(self, theme: Theme) -> None:
        self._store.set(THEME_KEY, str(theme))
        self._apply(theme)

    def _apply(self, theme: Theme) -> None:
        self._theme = theme
        if self._slot is not None:
            self._slot.update(str(theme))
        if self._meta_slot is not None:
            self._meta_slot.update(meta_theme_color(theme))
