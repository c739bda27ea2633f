"""Command group: case studies and legal pages behind the modals."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioGroup
from folioctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

_PROJECTS_EXAMPLES = """\
  folioctl projects list
  folioctl projects list --category web
  folioctl projects show teal-dashboard
  folioctl projects legal privacy"""


@click.group(cls=FolioGroup, examples=_PROJECTS_EXAMPLES)
@click.pass_obj
def projects(app: AppContext) -> None:
    """Browse the portfolio catalog."""


@projects.command("list", examples="  folioctl projects list --category branding")
@click.option("--category", default=None, help="all, design, web, or branding.")
@click.pass_obj
def list_projects(app: AppContext, category: str | None) -> None:
    """List projects, optionally filtered like the page's filter buttons."""
    app.emit(CatalogService(app.site).list_projects(category))


@projects.command(examples="  folioctl projects show coral-brand-kit")
@click.argument("key")
@click.pass_obj
def show(app: AppContext, key: str) -> None:
    """Show the case study for KEY."""
    app.emit(CatalogService(app.site).show_project(key))


@projects.command(examples="  folioctl projects legal terms")
@click.argument("key", type=click.Choice(["privacy", "terms"]))
@click.pass_obj
def legal(app: AppContext, key: str) -> None:
    """Show the privacy policy or the terms of service."""
    app.emit(CatalogService(app.site).show_legal(key))
