"""InitService — scaffold a new site root.

Writes a sparse ``folio.toml`` (only the values the owner chose) and
creates ``.folio/`` with the database and an empty plugin directory.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from folioctl.config.discovery import CONFIG_FILENAME, STATE_DIRNAME
from folioctl.infrastructure.database.engine import DB_FILENAME, database_path, init_database
from folioctl.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path


def _toml_str(value: str) -> str:
    # JSON string escaping is valid TOML basic-string escaping.
    return json.dumps(value, ensure_ascii=False)


def render_config(*, title: str, owner: str, url: str, recipient: str | None) -> str:
    """Text of a fresh ``folio.toml``."""
    lines = [
        "# folioctl site configuration. Unset keys use built-in defaults.",
        "",
        "[site]",
        f"title = {_toml_str(title)}",
        f"owner = {_toml_str(owner)}",
        f"url = {_toml_str(url)}",
        "",
        "[mail]",
        '# host = "smtp.example.com"',
        "# port = 587",
    ]
    if recipient:
        lines.append(f"recipient = {_toml_str(recipient)}")
    else:
        lines.append('# recipient = "you@example.com"')
    lines += [
        "",
        "[server]",
        "port = 3000",
        "",
    ]
    return "\n".join(lines)


class InitService:
    """Site scaffolding. Stateless: it runs before any Site exists."""

    @staticmethod
    def init_site(
        path: Path,
        *,
        title: str,
        owner: str,
        url: str = "http://localhost:3000/",
        recipient: str | None = None,
        force: bool = False,
    ) -> ServiceResult:
        op = "init_site"
        config_path = path / CONFIG_FILENAME
        if config_path.exists() and not force:
            return ServiceResult.failure(
                op,
                "already_initialized",
                f"{config_path} already exists (use --force to overwrite)",
                detail={"config_path": str(config_path)},
            )

        path.mkdir(parents=True, exist_ok=True)
        config_path.write_text(
            render_config(title=title, owner=owner, url=url, recipient=recipient),
            encoding="utf-8",
        )
        state_dir = path / STATE_DIRNAME
        engine = init_database(state_dir)
        engine.dispose()

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "site_root": str(path),
                "config_path": str(config_path),
                "database": str(database_path(state_dir)),
                "files_created": [
                    CONFIG_FILENAME,
                    f"{STATE_DIRNAME}/{DB_FILENAME}",
                    f"{STATE_DIRNAME}/plugins/",
                ],
            },
        )
