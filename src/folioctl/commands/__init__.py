"""Subcommand modules for folioctl.

``register_commands()`` imports command modules inside the function so the
root module stays cheap to import.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every command group and standalone command to *cli*."""
    # --- Groups ---
    from folioctl.commands.contact import contact
    from folioctl.commands.projects import projects
    from folioctl.commands.theme import theme

    cli.add_command(theme)
    cli.add_command(contact)
    cli.add_command(projects)

    # --- Standalone commands ---
    from folioctl.commands.carousel import carousel
    from folioctl.commands.init_cmd import init_cmd
    from folioctl.commands.serve import serve
    from folioctl.commands.share import share
    from folioctl.commands.typewriter import typewriter

    cli.add_command(init_cmd)
    cli.add_command(serve)
    cli.add_command(typewriter)
    cli.add_command(carousel)
    cli.add_command(share)
