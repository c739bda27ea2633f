"""Command: step a testimonial carousel."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioCommand
from folioctl.services.preview import PreviewService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  folioctl carousel 3 next next next
  folioctl carousel 5 prev
  folioctl carousel 4 set:-1 --start 2""",
)
@click.argument("count", type=int)
@click.argument("moves", nargs=-1)
@click.option("--start", default=0, type=int, help="Initial index.")
@click.pass_obj
def carousel(app: AppContext, count: int, moves: tuple[str, ...], start: int) -> None:
    """Apply MOVES (next, prev, set:<i>) to a carousel of COUNT items."""
    app.emit(PreviewService(app.site).carousel(count, moves, start=start))
