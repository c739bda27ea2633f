"""Command: build a blog share link."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioCommand
from folioctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  folioctl share twitter https://example.com/blog/post --title "My post"
  folioctl share linkedin https://example.com/blog/post
  folioctl -q share copy https://example.com/blog/post""",
)
@click.argument("platform")
@click.argument("url", required=False, default=None)
@click.option("--title", default="", help="Text for the tweet.")
@click.pass_obj
def share(app: AppContext, platform: str, url: str | None, title: str) -> None:
    """Print the link the PLATFORM share button opens for URL.

    URL defaults to the configured site URL.
    """
    page_url = url or app.settings.site.url
    app.emit(CatalogService(app.site).share(platform, page_url, title or app.settings.site.title))
