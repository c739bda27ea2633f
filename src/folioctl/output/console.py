"""Rich consoles for folioctl output.

Every console writes to a StringIO so renderers return plain strings; the
caller decides whether that string goes to stdout or stderr. Rich leaves
out colour codes on its own when the real terminal is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from folioctl.domain.theme import META_THEME_COLORS
from folioctl.domain.types import ProjectCategory
from folioctl.domain.types import Theme as SiteTheme

DEFAULT_WIDTH = 120

_CATEGORY_COLOURS = {
    ProjectCategory.DESIGN: "magenta",
    ProjectCategory.WEB: "cyan",
    ProjectCategory.BRANDING: "yellow",
}

FOLIO_THEME = Theme(
    {
        "folio.ok": "bold green",
        "folio.error": "bold red",
        "folio.warning": "bold yellow",
        "folio.op": "bold cyan",
        "folio.key": "dim",
        "folio.id": "bold blue",
        "folio.title": "bold",
        # Theme swatches use the page's own <meta name="theme-color"> values.
        "folio.theme.light": f"black on {META_THEME_COLORS[SiteTheme.LIGHT]}",
        "folio.theme.dark": f"white on {META_THEME_COLORS[SiteTheme.DARK]}",
        **{f"folio.category.{c.value.lower()}": colour for c, colour in _CATEGORY_COLOURS.items()},
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=FOLIO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """``folio.category.<name>`` for a known project category, else ``""``."""
    name = category.lower()
    known = {c.value.lower() for c in ProjectCategory}
    return f"folio.category.{name}" if name in known else ""
