"""Tests for the --examples flag.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from folioctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["theme", "--examples"], ["folioctl theme toggle"]),
    (["theme", "show", "--examples"], ["--system light"]),
    (["theme", "set", "--examples"], ["folioctl theme set dark"]),
    (["contact", "--examples"], ["folioctl contact list --limit 5"]),
    (["contact", "send", "--examples"], ["--endpoint"]),
    (["projects", "--examples"], ["--category web"]),
    (["projects", "legal", "--examples"], ["legal terms"]),
    (["init", "--examples"], ["--force"]),
    (["serve", "--examples"], ["--static-dir"]),
    (["typewriter", "--examples"], ["--live"]),
    (["carousel", "--examples"], ["set:-1"]),
    (["share", "--examples"], ["folioctl share twitter"]),
]


class TestExamples:
    @pytest.mark.parametrize(("args", "expected"), EXAMPLES_COMMANDS)
    def test_examples(self, cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Examples for" in result.output
        for keyword in expected:
            assert keyword in result.output

    def test_examples_not_in_required_args_check(self, cli_runner: CliRunner) -> None:
        # Eager flag exits before COUNT is validated.
        result = cli_runner.invoke(cli, ["carousel", "--examples"])
        assert result.exit_code == 0
