"""Command: site initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioCommand

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  folioctl init
  folioctl init ./site --title "Jane Doe" --owner "Jane Doe"
  folioctl init . --recipient jane@example.com --force"""


@click.command("init", cls=FolioCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option("--title", default=None, help="Site title.")
@click.option("--owner", default=None, help="Site owner's name.")
@click.option("--url", default="http://localhost:3000/", help="Public URL of the site.")
@click.option("--recipient", default=None, help="Where contact messages are mailed.")
@click.option("--force", is_flag=True, help="Overwrite an existing folio.toml.")
@click.pass_obj
def init_cmd(
    app: AppContext,
    path: str,
    title: str | None,
    owner: str | None,
    url: str,
    recipient: str | None,
    force: bool,
) -> None:
    """Create folio.toml and the .folio/ state directory."""
    site_path = Path(path).resolve()

    from folioctl.services.init import InitService

    app.emit(
        InitService.init_site(
            site_path,
            title=title or site_path.name,
            owner=owner or "Your Name",
            url=url,
            recipient=recipient,
            force=force,
        )
    )
