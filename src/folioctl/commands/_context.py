"""Per-invocation state shared by every folioctl command.

The root group stores an :class:`AppContext` in ``ctx.obj``; commands take
it with ``@click.pass_obj``. Opening the site database and loading plugins
waits until a command first asks for :attr:`AppContext.site`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from folioctl.config.logging import configure_logging
from folioctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from folioctl.config.settings import FolioSettings
    from folioctl.infrastructure.site import Site
    from folioctl.services.result import ServiceResult

log = structlog.get_logger(__name__)


class AppContext:
    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._site: Site | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def site(self) -> Site:
        if self._site is None:
            from folioctl.infrastructure.site import Site

            site = Site(self.settings)
            names = site.init_plugins()
            log.debug("cli.site_opened", root=str(site.root), plugins=names)
            self._site = site
        return self._site

    def emit(self, result: ServiceResult) -> None:
        """Write *result* in the selected output mode.

        Success goes to stdout with warnings on stderr (JSON mode keeps them
        in the payload). Failure goes to stderr and exits with status 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if self.output.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def close(self) -> None:
        if self._site is not None:
            self._site.close()
