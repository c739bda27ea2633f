"""Pluggy hook specifications for site events.

Hooks run synchronously after the event has been committed. A failing
hook never changes the outcome reported to the visitor.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("folioctl")
hookimpl = pluggy.HookimplMarker("folioctl")


class FolioHookSpec:
    """Hook specifications for the folioctl plugin system."""

    @hookspec
    def post_contact(
        self,
        name: str,
        email: str,
        subject: str,
        status: str,
    ) -> None:
        """Called after a contact message was delivered, logged, or failed."""

    @hookspec
    def post_theme_change(self, theme: str) -> None:
        """Called after the stored theme preference changed."""
