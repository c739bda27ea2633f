"""FolioSettings: one frozen object for CLI flags, environment and folio.toml.

Precedence, strongest first:

1. keyword arguments (the CLI passes its global flags here)
2. ``FOLIO_*`` environment variables; ``FOLIO_MAIL__HOST`` sets ``[mail] host``
3. the ``folio.toml`` that was found or named with ``--config``
4. defaults on the section models in :mod:`folioctl.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from folioctl.config.discovery import STATE_DIRNAME, find_config
from folioctl.config.models import (
    ContactConfig,
    MailConfig,
    ServerConfig,
    SiteConfig,
    ThemeConfig,
    TypewriterConfig,
)

# pydantic asks for sources through a classmethod, so the file chosen by
# from_cli() travels in a context variable for the duration of __init__.
_active_toml: ContextVar[Path | None] = ContextVar("folio_active_toml", default=None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed files become a CLI error naming the file."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = read_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self._values.items() if k in self.settings_cls.model_fields}


class FolioSettings(BaseSettings):
    """Everything a folioctl process needs to know about its site.

    Attributes:
        site_root: Directory of ``folio.toml``; the CWD when there is none.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FOLIO_",
        "env_nested_delimiter": "__",
    }

    site_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    site: SiteConfig = Field(default_factory=SiteConfig)
    typewriter: TypewriterConfig = Field(default_factory=TypewriterConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    mail: MailConfig = Field(default_factory=MailConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)

    @property
    def state_dir(self) -> Path:
        """``.folio/`` under the site root: database and local plugins."""
        return self.site_root / STATE_DIRNAME

    @property
    def static_dir(self) -> Path:
        configured = self.server.static_dir
        if configured is None:
            return self.site_root
        return configured if configured.is_absolute() else self.site_root / configured

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        site_root: Path | None = None,
        **overrides: Any,
    ) -> FolioSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* must exist. Without one, ``folio.toml`` is
        searched for upward from *site_root* (or the CWD), and the directory
        it sits in becomes the site root unless *site_root* was given.
        """
        if config_path is not None:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(site_root)

        if site_root is None:
            site_root = toml_path.parent if toml_path is not None else Path.cwd()

        token = _active_toml.set(toml_path)
        try:
            return cls(site_root=site_root, config_path=toml_path, **overrides)
        finally:
            _active_toml.reset(token)
