"""Command: run the contact backend and static file server."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
import structlog

from folioctl.commands._base import FolioCommand

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

log = structlog.get_logger(__name__)


@click.command(
    cls=FolioCommand,
    examples="""\
  # Serve the site root on the configured address (default 127.0.0.1:3000)
  folioctl serve

  # Public interface, custom port, separate static directory
  folioctl serve --host 0.0.0.0 --port 8080 --static-dir ./public""",
)
@click.option("--host", default=None, help="Bind address (default from [server]).")
@click.option("--port", default=None, type=int, help="Listen port (default from [server]).")
@click.option(
    "--static-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory served at / (default: site root).",
)
@click.option("--debug", is_flag=True, help="Flask debug mode with reloader.")
@click.pass_obj
def serve(
    app: AppContext,
    host: str | None,
    port: int | None,
    static_dir: Path | None,
    debug: bool,
) -> None:
    """Serve the portfolio and its contact endpoint over HTTP."""
    from folioctl.web.app import create_app

    site = app.site
    if static_dir is not None:
        server_cfg = site.settings.server.model_copy(update={"static_dir": static_dir.resolve()})
        site.settings = site.settings.model_copy(update={"server": server_cfg})

    cfg = site.settings.server
    bind_host = host or cfg.host
    bind_port = port or cfg.port
    flask_app = create_app(site)
    log.info("serve.start", host=bind_host, port=bind_port, static_dir=str(site.settings.static_dir))
    click.echo(f"Serving {site.settings.static_dir} on http://{bind_host}:{bind_port}/", err=True)
    try:
        flask_app.run(host=bind_host, port=bind_port, debug=debug)
    finally:
        site.close()
