"""Command: preview the hero typewriter."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioCommand
from folioctl.services.preview import PreviewService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  # Record 5 seconds of frames
  folioctl typewriter

  # Animate in the terminal for 20 seconds with custom roles
  folioctl typewriter --live --duration 20000 --role writer --role maker""",
)
@click.option("--duration", default=5000, type=int, help="Milliseconds to run.")
@click.option("--role", "roles", multiple=True, help="Phrase to type (repeatable).")
@click.option("--live", is_flag=True, help="Animate in real time on the terminal.")
@click.pass_obj
def typewriter(app: AppContext, duration: int, roles: tuple[str, ...], live: bool) -> None:
    """Run the typewriter animation and show what it renders."""
    svc = PreviewService(app.site)
    if not live:
        app.emit(svc.typewriter(duration_ms=duration, roles=roles or None))
        return

    def redraw(text: str) -> None:
        click.echo(f"\r\033[K{text}", nl=False)

    result = svc.typewriter(
        duration_ms=duration, roles=roles or None, sleep=time.sleep, on_frame=redraw
    )
    click.echo()
    if app.settings.json_output:
        app.emit(result)
