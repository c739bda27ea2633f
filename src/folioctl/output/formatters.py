"""Output-mode dispatch for ServiceResult.

Three modes, chosen by global flags:
- ``--json``: the full result, pydantic-serialised.
- ``--quiet``: ids for list results, a one-line status otherwise.
- default: Rich rendering chosen by ``result.op``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folioctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from folioctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for the terminal according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
