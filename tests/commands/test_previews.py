"""Tests for the typewriter and carousel preview commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from folioctl.cli import cli


@pytest.mark.usefixtures("_isolated_site")
class TestTypewriterCommand:
    def test_records_frames(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "typewriter", "--duration", "500", "--role", "hi"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["frames"] == ["h", "hi"]
        assert data["text"] == "hi"

    def test_quiet_prints_final_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "typewriter", "--duration", "250", "--role", "abcdef"])
        assert result.stdout.strip() == "abc"

    def test_default_roles(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["typewriter", "--duration", "100"])
        assert result.exit_code == 0
        assert "fullstack developer" in result.stdout

    def test_live_redraws_line(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        naps: list[float] = []
        monkeypatch.setattr("folioctl.commands.typewriter.time.sleep", naps.append)
        result = cli_runner.invoke(
            cli, ["typewriter", "--live", "--duration", "300", "--role", "go"]
        )
        assert result.exit_code == 0
        assert "\rgo" in result.stdout
        assert sum(naps) == pytest.approx(0.3)


@pytest.mark.usefixtures("_isolated_site")
class TestCarouselCommand:
    def test_moves(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "carousel", "3", "next", "next", "next"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["frames"] == [1, 2, 0]
        assert data["index"] == 0

    def test_set_and_start(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "carousel", "4", "set:-1", "--start", "2"])
        assert json.loads(result.stdout)["data"]["frames"] == [3]

    def test_empty_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["carousel", "0", "next"])
        assert result.exit_code == 0
        assert "Empty carousel" in result.output

    def test_invalid_move(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["carousel", "3", "sideways"])
        assert result.exit_code == 1
        assert "Unknown carousel move" in result.output
