"""Return type shared by every service call.

Services never raise for outcomes a visitor or operator can cause
(bad input, unknown keys, a refused mail relay); they return a failed
:class:`ServiceResult`. The CLI renders it and the Flask views turn it
into a status code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is stable and machine-readable (``invalid_email``,
    ``not_found``...); ``message`` is shown to people; ``detail`` carries
    extras such as the offending ``fields`` or valid ``choices``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation, tagged with the operation name in ``op``."""

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error is not None else None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error, warnings=warnings or [])
