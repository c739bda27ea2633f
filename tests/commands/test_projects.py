"""Tests for the projects command group and share."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from folioctl.cli import cli


@pytest.mark.usefixtures("_isolated_site")
class TestProjectsCommands:
    def test_list_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "projects", "list"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["count"] == 6

    def test_list_category(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "projects", "list", "--category", "Web"])
        assert result.exit_code == 0
        assert result.stdout.split() == ["minimal-portfolio", "landing-page-system"]

    def test_unknown_category(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["projects", "list", "--category", "music"])
        assert result.exit_code == 1
        assert "choices: all, design, web, branding" in result.output

    def test_show(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["projects", "show", "coral-brand-kit"])
        assert result.exit_code == 0
        assert "Challenge" in result.stdout

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["projects", "show", "nope"])
        assert result.exit_code == 1

    def test_legal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "projects", "legal", "terms"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["key"] == "terms"

    def test_legal_rejects_unknown(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["projects", "legal", "cookies"]).exit_code == 2


@pytest.mark.usefixtures("_isolated_site")
class TestShareCommand:
    def test_twitter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "share", "twitter", "https://example.com/post", "--title", "Hello world"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == (
            "https://twitter.com/intent/tweet?url=https%3A%2F%2Fexample.com%2Fpost"
            "&text=Hello%20world"
        )

    def test_copy_defaults_to_site_url(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["share", "copy"])
        assert result.stdout.strip() == "http://localhost:3000/"

    def test_unknown_platform(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["share", "myspace", "https://example.com"])
        assert result.exit_code == 1
        assert "Unknown share platform" in result.output
