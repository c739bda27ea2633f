"""Operation-specific Rich renderers for ServiceResult.

Renderers are looked up by ``result.op`` in :func:`render_result`;
unknown ops fall back to a key-value listing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from folioctl.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from rich.console import Console

    from folioctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: ids for lists, one status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict) and "id" in item)
    for key in ("url", "theme", "text"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="folio.ok"), Text(f"  {result.op}", style="folio.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="folio.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="folio.id")
    elif key == "title":
        v = Text(str(value), style="folio.title")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="folio.error"),
        Text(f"  {result.op}", style="folio.op"),
        Text(" - "),
        msg,
        sep="",
    )
    if err and err.detail and (verbose or "fields" in err.detail or "choices" in err.detail):
        for k, v in err.detail.items():
            console.print(f"    {k}: {', '.join(map(str, v)) if isinstance(v, list) else v}")


# ── Contact ───────────────────────────────────────────────────────────


def _render_contact(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("message", "status", "id"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_contacts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="folio.id", no_wrap=True)
    table.add_column("Received", style="dim")
    table.add_column("From")
    table.add_column("Subject", style="folio.title")
    table.add_column("Status")
    if verbose:
        table.add_column("Remote", style="dim")
    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("created", ""))[:19],
            f"{item.get('name', '')} <{item.get('email', '')}>",
            str(item.get("subject", "")),
            str(item.get("status", "")),
        ]
        if verbose:
            row.append(str(item.get("remote_addr") or ""))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} messages")


# ── Theme ─────────────────────────────────────────────────────────────


def _render_theme(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    theme = d.get("theme")
    if theme:
        console.print(
            Text("  theme: ", style="folio.key"),
            Text(f" {theme} ", style=f"folio.theme.{theme}"),
            sep="",
        )
    for key in ("toast", "meta_color", "stored"):
        if key in d:
            _field(console, key, d[key])


# ── Catalog ───────────────────────────────────────────────────────────


def _render_projects(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Key", style="folio.id", no_wrap=True)
    table.add_column("Title", style="folio.title")
    table.add_column("Category")
    if verbose:
        table.add_column("Meta", style="dim")
    for item in items:
        category = str(item.get("category", ""))
        row: list[str | Text] = [
            str(item.get("id", "")),
            str(item.get("title", "")),
            Text(category, style=style_for_category(category)),
        ]
        if verbose:
            row.append(str(item.get("meta", "")))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} projects")


def _render_project(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    lines = [
        str(d.get("meta", "")),
        "",
        str(d.get("description", "")),
        "",
        f"[bold]Challenge[/bold]\n{d.get('challenge', '')}",
        "",
        f"[bold]Solution[/bold]\n{d.get('solution', '')}",
    ]
    results = d.get("results", [])
    if results:
        lines += ["", "[bold]Results[/bold]", *(f"• {r}" for r in results)]
    stack = d.get("stack", [])
    if stack:
        lines += ["", f"[bold]Stack[/bold]  {', '.join(stack)}"]
    style = style_for_category(str(d.get("category", "")))
    console.print(
        Panel("\n".join(lines), title=str(d.get("title", "?")), border_style=style or "dim", expand=False)
    )


def _render_legal(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    lines = [f"[dim]Last updated: {d.get('updated', '')}[/dim]"]
    for section in d.get("sections", []):
        lines += ["", f"[bold]{section.get('heading', '')}[/bold]"]
        if section.get("body"):
            lines.append(section["body"])
        lines += [f"• {item}" for item in section.get("items", [])]
    console.print(Panel("\n".join(lines), title=str(d.get("title", "?")), expand=False))


def _render_share(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(result.data.get("url", ""), soft_wrap=True)


# ── Components ────────────────────────────────────────────────────────


def _render_frames(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Typewriter or carousel runs: one line per observed value."""
    _status_line(console, result)
    for key in ("phrases", "count", "ticks"):
        if key in result.data:
            _field(console, key, result.data[key])
    frames = result.data.get("frames", [])
    if verbose or len(frames) <= 40:
        for frame in frames:
            console.print(f"    {frame!s}", highlight=False)
    else:
        _field(console, "frames", f"{len(frames)} (use -v to list)")
    if "text" in result.data:
        _field(console, "text", result.data["text"])
    if "index" in result.data:
        _field(console, "index", result.data["index"])


# ── Init ──────────────────────────────────────────────────────────────


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("site_root", "config_path", "database"):
        if key in d:
            _field(console, key, d[key])
    files = d.get("files_created", [])
    _field(console, "files_created", len(files))
    if verbose:
        for f in files:
            console.print(f"    {f}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "submit_contact": _render_contact,
    "list_contacts": _render_contacts,
    "theme_current": _render_theme,
    "theme_toggle": _render_theme,
    "theme_set": _render_theme,
    "theme_clear": _render_theme,
    "list_projects": _render_projects,
    "show_project": _render_project,
    "show_legal": _render_legal,
    "share": _render_share,
    "typewriter": _render_frames,
    "carousel": _render_frames,
    "init_site": _render_init,
}
