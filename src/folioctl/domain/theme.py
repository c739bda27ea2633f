"""Theme preference rules: resolution order, toggling, and page metadata."""

from __future__ import annotations

from folioctl.domain.types import Theme

THEME_KEY = "theme"
DEFAULT_THEME = Theme.LIGHT

META_THEME_COLORS: dict[Theme, str] = {
    Theme.LIGHT: "#ffffff",
    Theme.DARK: "#030812",
}

TOAST_MESSAGES: dict[Theme, str] = {
    Theme.LIGHT: "Light mode activated",
    Theme.DARK: "Dark mode activated",
}


def parse_theme(value: str | None) -> Theme | None:
    """Return the Theme for a stored string, or None if it is absent or unknown."""
    if not value:
        return None
    try:
        return Theme(value.strip().lower())
    except ValueError:
        return None


def resolve_theme(
    stored: str | None,
    *,
    prefers_light: bool | None = None,
    default: Theme = DEFAULT_THEME,
) -> Theme:
    """Pick the startup theme.

    Stored preference wins; then the system light/dark signal; then *default*.
    """
    theme = parse_theme(stored)
    if theme is not None:
        return theme
    if prefers_light is not None:
        return Theme.LIGHT if prefers_light else Theme.DARK
    return default


def toggled(theme: Theme) -> Theme:
    return Theme.LIGHT if theme is Theme.DARK else Theme.DARK


def meta_theme_color(theme: Theme) -> str:
    return META_THEME_COLORS[theme]


def toast_message(theme: Theme) -> str:
    return TOAST_MESSAGES[theme]
