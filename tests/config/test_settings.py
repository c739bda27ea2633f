"""Tests for FolioSettings: defaults, TOML source, env vars, CLI flags."""

from pathlib import Path

import click
import pytest

from folioctl.config.settings import FolioSettings


class TestFolioSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.site_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.site.title == "Portfolio"
        assert settings.typewriter.typing_speed_ms == 100
        assert settings.contact.display_ms == 5000
        assert settings.mail.host == ""
        assert settings.server.port == 3000
        assert settings.theme.default == "light"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(site_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_state_and_static_dirs(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.state_dir == tmp_path / ".folio"
        assert settings.static_dir == tmp_path


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text(
            '[site]\ntitle = "Jane Doe"\n[typewriter]\nroles = ["writer", "maker"]\n'
        )
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.site.title == "Jane Doe"
        assert settings.typewriter.roles == ["writer", "maker"]
        assert settings.site.owner == "Your Name"  # default preserved

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text("[contact]\nmin_message_length = 20\n")
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.contact.min_message_length == 20
        assert settings.contact.display_ms == 5000

    def test_site_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "folio.toml").write_text("")
        nested = tmp_path / "posts" / "2024"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = FolioSettings.from_cli()
        assert settings.site_root == tmp_path
        assert settings.config_path == tmp_path / "folio.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "site.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[server]\nport = 8080\n")
        settings = FolioSettings.from_cli(config_path=str(custom), site_root=tmp_path)
        assert settings.server.port == 8080
        assert settings.config_path == custom

    def test_relative_static_dir(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text('[server]\nstatic_dir = "public"\n')
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.static_dir == tmp_path / "public"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text("[site\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FolioSettings.from_cli(site_root=tmp_path)


class TestEnvAndCliPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "folio.toml").write_text('[mail]\nhost = "smtp.toml.example"\n')
        monkeypatch.setenv("FOLIO_MAIL__HOST", "smtp.env.example")
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.mail.host == "smtp.env.example"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(
            site_root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True


class TestExplicitConfigErrors:
    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            FolioSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_unknown_sections_are_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text('[analytics]\nid = "UA-1"\n[site]\ntitle = "Kept"\n')
        settings = FolioSettings.from_cli(site_root=tmp_path)
        assert settings.site.title == "Kept"
