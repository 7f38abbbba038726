"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from lexicon_ty.output.console import create_console, get_output, style_for_def

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from lexicon_ty.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="lex.ok"), Text(f"  {result.op}", style="lex.op"))


def _field(console: Console, key: str, value: Any) -> None:
    if key == "id":
        style = "lex.id"
    elif key in ("path", "root"):
        style = "lex.path"
    else:
        style = ""
    console.print(Text(f"  {key}: ", style="lex.key"), Text(str(value), style=style))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(Text(f"    {key}: {value}"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "root", data.get("root", ""))
    _field(console, "decoded", f"{data.get('decoded', 0)}/{data.get('files', 0)}")
    if verbose:
        for lexicon_id in data.get("lexicons", []):
            console.print(Text(f"    {lexicon_id}", style="lex.id"))
        _render_meta(console, result)


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "id", data.get("id", ""))
    _field(console, "lexicon", data.get("lexicon", ""))
    if data.get("description"):
        _field(console, "description", data["description"])

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Def")
    table.add_column("Type")
    table.add_column("Detail")
    for name, summary in data.get("defs", {}).items():
        def_type = summary.get("type", "")
        table.add_row(
            Text(name),
            Text(def_type, style=style_for_def(def_type)),
            Text(_def_detail(summary)),
        )
    console.print(table)


def _def_detail(summary: dict[str, Any]) -> str:
    parts: list[str] = []
    if "key" in summary:
        parts.append(f"key={summary['key']}")
    if summary.get("input"):
        parts.append(f"in={summary['input']}")
    if summary.get("output"):
        parts.append(f"out={summary['output']}")
    if summary.get("message_refs"):
        parts.append(f"messages={len(summary['message_refs'])}")
    if summary.get("errors"):
        parts.append(f"errors={','.join(summary['errors'])}")
    return " ".join(parts)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="lex.error"), Text(f"  {result.op}: {message}"))
    if error is None:
        return

    failures = error.detail.get("failures", [])
    if failures:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("File", style="lex.path")
        table.add_column("Location", style="lex.location")
        table.add_column("Problem")
        for failure in failures:
            table.add_row(
                Text(failure["path"]), Text(failure["location"]), Text(failure["message"])
            )
        console.print(table)
    elif "location" in error.detail:
        _field(console, "location", error.detail["location"])

    if verbose:
        for key, value in error.detail.items():
            if key != "failures":
                _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check": _render_check,
    "describe": _render_describe,
}
