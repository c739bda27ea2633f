"""Common base for the service classes.

A service is a thin object around one :class:`Site`; it holds no state of
its own, so callers create one per request or per command.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from folioctl.config.settings import FolioSettings
    from folioctl.infrastructure.site import Site

logger = logging.getLogger(__name__)


class BaseService:
    def __init__(self, site: Site) -> None:
        self._site = site

    @property
    def settings(self) -> FolioSettings:
        return self._site.settings

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Tell plugins about a finished change.

        The change has already happened, so a raising hook is reported as a
        warning on the result and the operation still succeeds. Without
        loaded plugins this does nothing.
        """
        pm = self._site.plugin_manager
        if pm is None:
            return
        try:
            pm.dispatch(hook_name, payload)
        except Exception:
            logger.warning("Plugin hook %s raised", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
