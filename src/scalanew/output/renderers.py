"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from scalanew.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from scalanew.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints the one value a script would want: package names for
    completion, the prefix for ``initial-path``, the new file's path.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "completion_entries":
        return "\n".join(d.get("items", []))
    if result.op == "initial_path":
        return str(d.get("initial_path", ""))
    if result.op == "create_file":
        return str(d.get("path", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="scala.ok")
    op = Text(f"  {result.op}", style="scala.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="scala.key")
    if key in ("name", "type_name"):
        v = Text(str(value), style="scala.name")
    elif key in ("package_name", "initial_path"):
        v = Text(str(value), style="scala.package")
    elif key in ("path", "folder", "resource"):
        v = Text(str(value), style="scala.path")
    elif key == "kind":
        v = Text(str(value), style="scala.kind")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _variables(console: Console, variables: dict[str, str]) -> None:
    for key in ("package_name", "type_name"):
        if key in variables:
            _field(console, key, variables[key])


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="scala.error")
    op = Text(f"  {result.op}", style="scala.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_validation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "name", d.get("name", ""))
    if "folder" in d:
        _field(console, "folder", d["folder"])
    _variables(console, d.get("variables", {}))
    if verbose:
        _render_meta(console, result)


def _render_created(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("name", "kind", "path"):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        _variables(console, d.get("variables", {}))
        _render_meta(console, result)


def _render_initial_path(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "resource", d.get("resource", ""))
    _field(console, "initial_path", d.get("initial_path") or '""')
    if verbose:
        _render_meta(console, result)


def _render_completions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items: list[str] = d.get("items", [])
    _status_line(console, result)
    _field(console, "count", d.get("count", len(items)))

    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Package", style="scala.package")
        for item in items:
            table.add_row(item)
        console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate_name": _render_validation,
    "template_variables": _render_validation,
    "create_file": _render_created,
    "initial_path": _render_initial_path,
    "completion_entries": _render_completions,
}
