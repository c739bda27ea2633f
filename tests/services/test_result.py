"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from folioctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="x")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("op", "bad", "Bad thing", detail={"k": 1}, warnings=["w"])
        assert not result.ok
        assert result.error == ServiceError(code="bad", message="Bad thing", detail={"k": 1})
        assert result.warnings == ["w"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_roundtrip(self) -> None:
        result = ServiceResult.failure("op", "code", "msg")
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result


def test_error_code_property() -> None:
    assert ServiceResult(ok=True, op="x").error_code is None
    assert ServiceResult.failure("x", "not_found", "gone").error_code == "not_found"
