"""Locating a site on disk.

A site root is the directory holding ``folio.toml``; runtime state lives
next to it in ``.folio/``. Commands may run from any subdirectory, so the
config is searched for upward from the working directory. ``FOLIO_CONFIG``
pins an explicit file and disables the search.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "folio.toml"
CONFIG_ENV_VAR = "FOLIO_CONFIG"
STATE_DIRNAME = ".folio"


def iter_parents(start: Path) -> Iterator[Path]:
    """*start* (resolved) followed by each ancestor up to the filesystem root."""
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``folio.toml`` governing *start* (default CWD), or None.

    A ``FOLIO_CONFIG`` pointing at a missing file yields None rather than
    falling back to the search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    return next(
        (d / CONFIG_FILENAME for d in iter_parents(start or Path.cwd()) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
