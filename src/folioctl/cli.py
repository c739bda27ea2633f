"""``folioctl`` entry point.

Global flags are collected once here into :class:`FolioSettings`; every
subcommand reads them back through the shared :class:`AppContext`.
"""

from __future__ import annotations

from pathlib import Path

import click

from folioctl import __version__
from folioctl.commands import register_commands
from folioctl.commands._base import FolioGroup
from folioctl.commands._context import AppContext
from folioctl.config.settings import FolioSettings

_ROOT_EXAMPLES = """\
  folioctl init ./site --title "Jane Doe"
  folioctl serve --port 8080
  folioctl --json theme toggle
  folioctl -c ./site/folio.toml contact list"""


@click.group(cls=FolioGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(__version__, "-V", "--version", prog_name="folioctl")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ids or a one-line status.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and full detail.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="FILE",
    help="Use FILE instead of the discovered folio.toml.",
)
@click.option(
    "--site-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Site directory (default: where folio.toml was found, else CWD).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, site_root: Path | None, **flags: bool) -> None:
    """folioctl: portfolio components, contact backend, and theme store."""
    settings = FolioSettings.from_cli(
        config_path=config_path,
        site_root=site_root.resolve() if site_root else None,
        **flags,
    )
    ctx.obj = AppContext(settings)
    ctx.call_on_close(ctx.obj.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
