"""ThemeService — the stored light/dark preference."""

from __future__ import annotations

from folioctl.domain.theme import (
    DEFAULT_THEME,
    THEME_KEY,
    meta_theme_color,
    parse_theme,
    resolve_theme,
    toast_message,
    toggled,
)
from folioctl.domain.types import Theme
from folioctl.services.base import BaseService
from folioctl.services.result import ServiceResult


class ThemeService(BaseService):
    """Read, toggle, and set the theme preference."""

    def current(self, *, prefers_light: bool | None = None) -> ServiceResult:
        """Resolve the startup theme without writing anything."""
        stored = self._site.preferences.get(THEME_KEY)
        cfg = self.settings.theme
        theme = resolve_theme(
            stored,
            prefers_light=prefers_light if cfg.follow_system else None,
            default=parse_theme(cfg.default) or DEFAULT_THEME,
        )
        return ServiceResult(
            ok=True,
            op="theme_current",
            data={
                "theme": str(theme),
                "stored": parse_theme(stored) is not None,
                "meta_color": meta_theme_color(theme),
            },
        )

    def toggle(self) -> ServiceResult:
        """Flip the current theme and persist it."""
        current = Theme(self.current().data["theme"])
        return self._store(toggled(current), op="theme_toggle")

    def set(self, value: str) -> ServiceResult:
        theme = parse_theme(value)
        if theme is None:
            return ServiceResult.failure(
                "theme_set",
                "invalid_theme",
                f"Unknown theme {value!r}; expected 'light' or 'dark'",
            )
        return self._store(theme, op="theme_set")

    def clear(self) -> ServiceResult:
        """Forget the stored preference so the system signal applies again."""
        self._site.preferences.delete(THEME_KEY)
        return ServiceResult(ok=True, op="theme_clear", data={"stored": False})

    def _store(self, theme: Theme, *, op: str) -> ServiceResult:
        self._site.preferences.set(THEME_KEY, str(theme))
        warnings: list[str] = []
        self._dispatch_event("post_theme_change", {"theme": str(theme)}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "theme": str(theme),
                "toast": toast_message(theme),
                "meta_color": meta_theme_color(theme),
            },
            warnings=warnings,
        )
