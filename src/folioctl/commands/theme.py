"""Command group: the stored light/dark preference."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioGroup
from folioctl.services.theme import ThemeService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

_THEME_EXAMPLES = """\
  folioctl theme show
  folioctl theme show --system dark
  folioctl theme toggle
  folioctl theme set dark
  folioctl theme clear"""


@click.group(cls=FolioGroup, examples=_THEME_EXAMPLES)
@click.pass_obj
def theme(app: AppContext) -> None:
    """Show or change the site theme preference."""


@theme.command(
    examples="""\
  folioctl theme show
  folioctl theme show --system light
  folioctl --json theme show"""
)
@click.option(
    "--system",
    type=click.Choice(["light", "dark"]),
    default=None,
    help="Pretend the OS reports this colour scheme.",
)
@click.pass_obj
def show(app: AppContext, system: str | None) -> None:
    """Resolve the theme a visitor would see on load."""
    prefers_light = None if system is None else system == "light"
    app.emit(ThemeService(app.site).current(prefers_light=prefers_light))


@theme.command(examples="  folioctl theme toggle")
@click.pass_obj
def toggle(app: AppContext) -> None:
    """Flip between light and dark and store the choice."""
    app.emit(ThemeService(app.site).toggle())


@theme.command("set", examples="  folioctl theme set dark")
@click.argument("value")
@click.pass_obj
def set_theme(app: AppContext, value: str) -> None:
    """Store VALUE (light or dark) as the preference."""
    app.emit(ThemeService(app.site).set(value))


@theme.command(examples="  folioctl theme clear")
@click.pass_obj
def clear(app: AppContext) -> None:
    """Forget the stored preference."""
    app.emit(ThemeService(app.site).clear())
