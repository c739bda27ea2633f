"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from folioctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["theme", "contact", "projects", "init", "serve", "typewriter", "carousel"]),
    (["theme", "--help"], ["show", "toggle", "set", "clear"]),
    (["theme", "show", "--help"], ["--system"]),
    (["contact", "--help"], ["send", "list"]),
    (["contact", "send", "--help"], ["--name", "--email", "--subject", "--message", "--endpoint"]),
    (["contact", "list", "--help"], ["--limit"]),
    (["projects", "--help"], ["list", "show", "legal"]),
    (["projects", "list", "--help"], ["--category"]),
    (["projects", "show", "--help"], ["KEY"]),
    (["init", "--help"], ["PATH", "--title", "--owner", "--recipient", "--force"]),
    (["typewriter", "--help"], ["--duration", "--role", "--live"]),
    (["carousel", "--help"], ["COUNT", "MOVES", "--start"]),
    (["share", "--help"], ["PLATFORM", "--title"]),
]


class TestHelp:
    @pytest.mark.parametrize(("args", "expected"), HELP_COMMANDS)
    def test_help(self, cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        for keyword in expected:
            assert keyword in result.output

    def test_honeypot_option_hidden(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["contact", "send", "--help"])
        assert "--website" not in result.output
