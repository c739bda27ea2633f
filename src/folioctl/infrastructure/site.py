"""Site — the single dependency injected into every service.

Owns the database engine, the preference store, the contact log, the
mailer, and the plugin manager. Everything is created lazily so that
``--help`` and pure component commands never touch the disk.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from folioctl.infrastructure.contacts import ContactLog
from folioctl.infrastructure.database.engine import init_database
from folioctl.infrastructure.mailer import create_mailer
from folioctl.infrastructure.preferences import SqlPreferenceStore

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from folioctl.config.settings import FolioSettings
    from folioctl.infrastructure.mailer import Mailer
    from folioctl.infrastructure.preferences import PreferenceStore
    from folioctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class Site:
    """Runtime resources for one site root."""

    def __init__(
        self,
        settings: FolioSettings,
        *,
        mailer: Mailer | None = None,
        preferences: PreferenceStore | None = None,
    ) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._mailer = mailer
        self._preferences = preferences
        self._contacts: ContactLog | None = None
        self._plugin_manager: PluginManager | None = None

    @property
    def root(self) -> Path:
        return self.settings.site_root

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = init_database(self.settings.state_dir)
            logger.debug("Opened site database under %s", self.settings.state_dir)
        return self._engine

    @property
    def preferences(self) -> PreferenceStore:
        if self._preferences is None:
            self._preferences = SqlPreferenceStore(self.engine)
        return self._preferences

    @property
    def contacts(self) -> ContactLog:
        if self._contacts is None:
            self._contacts = ContactLog(self.engine)
        return self._contacts

    @property
    def mailer(self) -> Mailer:
        if self._mailer is None:
            self._mailer = create_mailer(self.settings.mail)
        return self._mailer

    @property
    def plugin_manager(self) -> PluginManager | None:
        return self._plugin_manager

    def init_plugins(self) -> list[str]:
        """Discover entry-point and local plugins. Returns their names."""
        from folioctl.plugins.manager import PluginManager

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=self.settings.state_dir / "plugins")
        self._plugin_manager = pm
        return names

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
