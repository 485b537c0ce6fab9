"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from optionkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from optionkit.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "probe":
        value = result.data.get("value")
        return "" if value is None else str(value)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="opt.ok"), Text(f"  {result.op}", style="opt.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="opt.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="opt.error"),
        Text(f"  {result.op}", style="opt.op"),
        Text(f"—{code} {msg}"),
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_probe(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    present = bool(result.data.get("present"))
    state = Text("present", style="opt.present") if present else Text("empty", style="opt.empty")
    console.print(Text("  state: ", style="opt.key"), state, sep="")
    _field(console, "value", repr(result.data.get("value")))
    _field(console, "source", result.data.get("source", ""))


def _render_examples(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Expression")
    table.add_column("Result")
    for example in result.data.get("examples", []):
        table.add_row(Text(example["expression"]), Text(repr(example["result"])))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "probe": _render_probe,
    "examples": _render_examples,
}
