"""Tests for the format_result dispatcher and OutputSettings."""

import json

from folioctl.output.formatters import OutputSettings, format_result
from folioctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert (s.json_output, s.quiet, s.verbose) == (False, False, False)


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("theme_set", theme="dark"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "theme_set"
        assert data["data"]["theme"] == "dark"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("theme_set", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["op"] == "test"


class TestFormatResultModes:
    def test_quiet(self) -> None:
        assert format_result(_ok("theme_clear"), settings=OutputSettings(quiet=True)) == "OK: theme_clear"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("theme_clear", stored=False))
        assert "OK" in output
        assert "theme_clear" in output

    def test_no_settings(self) -> None:
        assert "ERROR" in format_result(_err())
