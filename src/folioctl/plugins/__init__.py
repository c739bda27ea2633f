"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) and ``.folio/plugins/*.py``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from folioctl.plugins.hookspecs import hookimpl
from folioctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
